# Standard library imports
from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

# Local application imports
from civicconnect.models.issues.issue import IssueStatus
from civicconnect.schemas.issues.issue_schemas import ALL, IssueFilterCriteria, StatusCounts


class FilterableIssue(Protocol):
    title: str
    description: str
    location: str
    category: str
    status: IssueStatus


IssueT = TypeVar("IssueT", bound=FilterableIssue)


def matches_term(issue: FilterableIssue, term: str) -> bool:
    if not term:
        return True
    needle = term.lower()
    return needle in issue.title.lower() or needle in issue.description.lower() or needle in issue.location.lower()


def matches(issue: FilterableIssue, criteria: IssueFilterCriteria) -> bool:
    return (
        matches_term(issue, criteria.term)
        and (criteria.status == ALL or issue.status == criteria.status)
        and (criteria.category == ALL or issue.category == criteria.category)
    )


def filter_issues(issues: Sequence[IssueT], criteria: IssueFilterCriteria) -> list[IssueT]:
    """
    Narrow an already scoped list. Order is kept as given (newest first from
    the store); nothing is paginated.
    """
    return [issue for issue in issues if matches(issue, criteria)]


def count_by_status(issues: Iterable[FilterableIssue]) -> StatusCounts:
    counts = StatusCounts()
    for issue in issues:
        counts.total += 1
        match issue.status:
            case IssueStatus.PENDING:
                counts.pending += 1
            case IssueStatus.IN_PROGRESS:
                counts.in_progress += 1
            case IssueStatus.RESOLVED:
                counts.resolved += 1
    return counts
