# Local application imports
from civicconnect.services.issues.filter_services import count_by_status, filter_issues, matches
from civicconnect.services.issues.issue_services import (
    get_issue_for_viewer,
    get_public_status_counts,
    submit_issue,
    update_issue,
)
from civicconnect.services.issues.scope_services import (
    DatasetScope,
    can_update_issues,
    fetch_scoped_issues,
    load_dashboard,
    select_scope,
)
from civicconnect.services.issues.visibility_services import (
    can_view_contact_info,
    project_issue,
    project_issues,
)

__all__ = [
    "DatasetScope",
    "can_update_issues",
    "can_view_contact_info",
    "count_by_status",
    "fetch_scoped_issues",
    "filter_issues",
    "get_issue_for_viewer",
    "get_public_status_counts",
    "load_dashboard",
    "matches",
    "project_issue",
    "project_issues",
    "select_scope",
    "submit_issue",
    "update_issue",
]
