"""Dataset scope chosen for each kind of viewer."""

# Standard library imports
import uuid

# Third-party imports
import pytest

# Local application imports
from civicconnect.core.errors import AuthenticationRequired
from civicconnect.models.auth.profile import Role
from civicconnect.schemas.auth import Viewer, ViewerKind
from civicconnect.services.auth.user_services import parse_role
from civicconnect.services.issues import DatasetScope, can_update_issues, select_scope
from civicconnect.services.issues import scope_services
from civicconnect.services.issues.scope_services import issue_in_scope


class TestViewerKind:
    @pytest.mark.parametrize(
        ("role", "kind"),
        [
            (Role.CITIZEN, ViewerKind.CITIZEN),
            (Role.AUTHORITY, ViewerKind.AUTHORITY),
            (Role.ADMIN, ViewerKind.ADMIN),
            (None, ViewerKind.CITIZEN),
        ],
    )
    def test_signed_in_kinds(self, role, kind) -> None:
        assert Viewer(user_id=uuid.uuid4(), role=role).kind is kind

    def test_no_identity_is_anonymous(self) -> None:
        viewer = Viewer.anonymous()
        assert viewer.is_anonymous
        assert viewer.kind is ViewerKind.ANONYMOUS

    def test_viewer_is_immutable(self) -> None:
        viewer = Viewer(user_id=uuid.uuid4(), role=Role.CITIZEN)
        with pytest.raises(ValueError):
            viewer.role = Role.ADMIN  # type: ignore[misc]


class TestParseRole:
    def test_known_roles(self) -> None:
        assert parse_role("citizen") is Role.CITIZEN
        assert parse_role("authority") is Role.AUTHORITY
        assert parse_role("admin") is Role.ADMIN

    def test_missing_or_unknown_role_falls_back_to_citizen(self) -> None:
        assert parse_role(None) is Role.CITIZEN
        assert parse_role("superuser") is Role.CITIZEN
        assert parse_role("") is Role.CITIZEN


class TestSelectScope:
    def test_anonymous_gets_public(self) -> None:
        assert select_scope(Viewer.anonymous()) is DatasetScope.PUBLIC

    def test_citizen_gets_owned(self) -> None:
        assert select_scope(Viewer(user_id=uuid.uuid4(), role=Role.CITIZEN)) is DatasetScope.OWNED

    def test_unknown_role_gets_owned(self) -> None:
        viewer = Viewer(user_id=uuid.uuid4(), role=parse_role("moderator"))
        assert select_scope(viewer) is DatasetScope.OWNED

    def test_authority_and_admin_get_all(self) -> None:
        for role in (Role.AUTHORITY, Role.ADMIN):
            assert select_scope(Viewer(user_id=uuid.uuid4(), role=role)) is DatasetScope.ALL

    def test_only_full_scope_may_update(self) -> None:
        assert can_update_issues(Viewer.anonymous()) is False
        assert can_update_issues(Viewer(user_id=uuid.uuid4(), role=Role.CITIZEN)) is False
        assert can_update_issues(Viewer(user_id=uuid.uuid4(), role=Role.AUTHORITY)) is True
        assert can_update_issues(Viewer(user_id=uuid.uuid4(), role=Role.ADMIN)) is True


class TestIssueInScope:
    def test_citizen_scope_is_own_issues(self, issue_factory) -> None:
        me = uuid.uuid4()
        viewer = Viewer(user_id=me, role=Role.CITIZEN)
        assert issue_in_scope(viewer, issue_factory(user_id=me)) is True
        assert issue_in_scope(viewer, issue_factory()) is False

    def test_public_and_authority_scopes_cover_everything(self, issue_factory) -> None:
        issue = issue_factory()
        assert issue_in_scope(Viewer.anonymous(), issue) is True
        assert issue_in_scope(Viewer(user_id=uuid.uuid4(), role=Role.AUTHORITY), issue) is True


class TestFetchScopedIssues:
    @pytest.mark.asyncio
    async def test_owned_scope_without_identity_is_rejected(self, monkeypatch) -> None:
        monkeypatch.setattr(scope_services, "select_scope", lambda viewer: DatasetScope.OWNED)

        with pytest.raises(AuthenticationRequired):
            await scope_services.fetch_scoped_issues(None, Viewer.anonymous())  # type: ignore[arg-type]
