"""MembershipService unit tests with mocked repos."""

from unittest.mock import AsyncMock, PropertyMock

import pytest

from rentals.application.dtos.membership import (
    MembershipLookup,
    MembershipResult,
    RoleMemberListItem,
)
from rentals.application.dtos.pagination import Page
from rentals.application.dtos.person import PersonResult
from rentals.application.use_cases.memberships import MembershipService
from rentals.domain.enums import RoleType
from rentals.domain.exceptions import (
    DuplicateKeyException,
    NotSupportedException,
    ResourceNotFoundException,
    ValidationException,
)


def _person(person_id: int = 7, *, active: bool = True) -> PersonResult:
    return PersonResult(
        person_id=person_id,
        national_id="30000007",
        last_name="Garcia",
        first_name="Maria",
        phone="+54 11 5555 0000",
        email="maria@example.com",
        active=active,
    )


def _membership(membership_id: int = 3, person_id: int = 7, *, active: bool = True):
    return MembershipResult(
        membership_id=membership_id,
        person_id=person_id,
        role=RoleType.OWNER,
        active=active,
    )


@pytest.fixture
def mocks():
    """MembershipService (owner) with mocked membership and person repos."""
    membership_repo = AsyncMock()
    type(membership_repo).role = PropertyMock(return_value=RoleType.OWNER)
    person_repo = AsyncMock()
    person_repo.get_active_by_id = AsyncMock(return_value=_person())
    person_repo.get_by_id = AsyncMock(return_value=_person())
    svc = MembershipService(membership_repo, person_repo, autocomplete_page_size=10)
    return svc, membership_repo, person_repo


async def test_grant_refused_when_role_already_active(mocks) -> None:
    """An active membership blocks the grant; the store is never asked to grant."""
    svc, membership_repo, _ = mocks
    membership_repo.get_by_person_id = AsyncMock(
        return_value=MembershipLookup(_membership(), 1)
    )
    with pytest.raises(ValidationException, match="already holds the owner role"):
        await svc.grant_to_person(7)
    membership_repo.grant.assert_not_awaited()


async def test_grant_reactivates_revoked_membership(mocks) -> None:
    svc, membership_repo, _ = mocks
    membership_repo.get_by_person_id = AsyncMock(
        return_value=MembershipLookup(_membership(active=False), 0)
    )
    membership_repo.grant = AsyncMock(return_value=3)
    result = await svc.grant_to_person(7)
    assert result.membership_id == 3
    assert result.reactivated is True
    membership_repo.grant.assert_awaited_once_with(7)


async def test_grant_to_person_without_prior_membership(mocks) -> None:
    svc, membership_repo, _ = mocks
    membership_repo.get_by_person_id = AsyncMock(
        return_value=MembershipLookup(None, 0)
    )
    membership_repo.grant = AsyncMock(return_value=11)
    result = await svc.grant_to_person(7)
    assert result.membership_id == 11
    assert result.reactivated is False
    assert result.role == RoleType.OWNER


async def test_grant_to_inactive_person_is_not_found(mocks) -> None:
    svc, membership_repo, person_repo = mocks
    person_repo.get_active_by_id = AsyncMock(return_value=None)
    with pytest.raises(ResourceNotFoundException):
        await svc.grant_to_person(7)
    membership_repo.get_by_person_id.assert_not_awaited()


async def test_enroll_creates_person_then_grants(mocks) -> None:
    svc, membership_repo, person_repo = mocks
    person_repo.create = AsyncMock(return_value=7)
    membership_repo.grant = AsyncMock(return_value=1)
    result = await svc.enroll(_person().to_data())
    person_repo.create.assert_awaited_once()
    membership_repo.grant.assert_awaited_once_with(7)
    assert result.person.person_id == 7
    assert result.reactivated is False


async def test_enroll_duplicate_does_not_grant(mocks) -> None:
    """DuplicateKeyException from the person store propagates untouched."""
    svc, membership_repo, person_repo = mocks
    person_repo.create = AsyncMock(
        side_effect=DuplicateKeyException("email", "maria@example.com")
    )
    with pytest.raises(DuplicateKeyException) as exc_info:
        await svc.enroll(_person().to_data())
    assert exc_info.value.field == "email"
    membership_repo.grant.assert_not_awaited()


async def test_revoke_unknown_membership_is_not_found(mocks) -> None:
    svc, membership_repo, _ = mocks
    membership_repo.get_by_id = AsyncMock(return_value=None)
    with pytest.raises(ResourceNotFoundException):
        await svc.revoke(99)
    membership_repo.revoke.assert_not_awaited()


async def test_revoke_logs_when_no_row_changes(mocks, caplog) -> None:
    """A revoke that reaches the store but updates nothing is still reported inactive."""
    svc, membership_repo, _ = mocks
    membership_repo.get_by_id = AsyncMock(return_value=_membership())
    membership_repo.revoke = AsyncMock(return_value=0)
    with caplog.at_level("WARNING"):
        result = await svc.revoke(3)
    assert result.active is False
    assert "owner membership 3 changed no rows" in caplog.text


async def test_revoke_for_person_requires_active_membership(mocks) -> None:
    svc, membership_repo, _ = mocks
    membership_repo.get_by_person_id = AsyncMock(
        return_value=MembershipLookup(_membership(active=False), 0)
    )
    with pytest.raises(ValidationException, match="not an active owner"):
        await svc.revoke_for_person(7)


async def test_revoke_for_person(mocks) -> None:
    svc, membership_repo, _ = mocks
    membership_repo.get_by_person_id = AsyncMock(
        return_value=MembershipLookup(_membership(), 1)
    )
    membership_repo.get_by_id = AsyncMock(return_value=_membership())
    membership_repo.revoke = AsyncMock(return_value=1)
    result = await svc.revoke_for_person(7)
    membership_repo.revoke.assert_awaited_once_with(3)
    assert result.active is False


async def test_eligibility(mocks) -> None:
    svc, membership_repo, _ = mocks
    membership_repo.get_by_person_id = AsyncMock(
        return_value=MembershipLookup(_membership(), 1)
    )
    assert (await svc.check_eligibility(7)).eligible is False
    membership_repo.get_by_person_id = AsyncMock(
        return_value=MembershipLookup(None, 0)
    )
    eligibility = await svc.check_eligibility(7)
    assert eligibility.eligible is True
    assert eligibility.message == "Person can be registered as owner"


async def test_search_blank_term_returns_empty(mocks) -> None:
    svc, membership_repo, _ = mocks
    assert await svc.search("   ") == []
    assert await svc.search(None) == []
    membership_repo.list_paged.assert_not_awaited()


async def test_search_uses_first_page(mocks) -> None:
    svc, membership_repo, _ = mocks
    item = RoleMemberListItem(
        person_id=7,
        national_id="30000007",
        last_name="Garcia",
        first_name="Maria",
        phone="+54 11 5555 0000",
        email="maria@example.com",
    )
    membership_repo.list_paged = AsyncMock(
        return_value=Page(items=[item], total=1, page=1, page_size=10, search="gar")
    )
    assert await svc.search(" gar ") == [item]
    membership_repo.list_paged.assert_awaited_once_with(1, 10, "gar")


async def test_get_detail_requires_active_person(mocks) -> None:
    svc, membership_repo, person_repo = mocks
    membership_repo.get_by_id = AsyncMock(return_value=_membership())
    person_repo.get_active_by_id = AsyncMock(return_value=None)
    with pytest.raises(ResourceNotFoundException):
        await svc.get_detail(3)


async def test_update_is_not_supported(mocks) -> None:
    svc, membership_repo, _ = mocks
    membership_repo.update = AsyncMock(
        side_effect=NotSupportedException("owner.update", "Not offered.")
    )
    with pytest.raises(NotSupportedException):
        await svc.update(3, 8)
