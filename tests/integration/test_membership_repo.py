"""RoleMembershipRepository integration tests, run for every role."""

import pytest
from sqlalchemy import func, select

from rentals.domain.enums import RoleType
from rentals.domain.exceptions import NotSupportedException
from rentals.infrastructure.persistence.models import ROLE_DESCRIPTORS

pytestmark = [
    pytest.mark.integration,
    pytest.mark.parametrize("role", list(RoleType)),
]


async def _row_count(database, role: RoleType, person_id: int) -> int:
    model = ROLE_DESCRIPTORS[role].model
    async with database.session() as session:
        return await session.scalar(
            select(func.count()).select_from(model).where(model.person_id == person_id)
        )


async def test_lookup_states(role, person_repo, role_repos, make_person_data) -> None:
    """(None, 0) before any grant, (row, 1) when active, (row, 0) after revoke."""
    repo = role_repos[role]
    person_id = await person_repo.create(make_person_data(1))

    lookup = await repo.get_by_person_id(person_id)
    assert lookup.membership is None
    assert lookup.active_flag == 0

    membership_id = await repo.grant(person_id)
    lookup = await repo.get_by_person_id(person_id)
    assert lookup.membership.membership_id == membership_id
    assert lookup.membership.role == role
    assert lookup.active_flag == 1

    assert await repo.revoke(membership_id) == 1
    lookup = await repo.get_by_person_id(person_id)
    assert lookup.membership is not None
    assert lookup.active_flag == 0


async def test_double_grant_keeps_one_row(
    role, database, person_repo, role_repos, make_person_data
) -> None:
    repo = role_repos[role]
    person_id = await person_repo.create(make_person_data(1))
    first = await repo.grant(person_id)
    second = await repo.grant(person_id)
    assert first == second
    assert await _row_count(database, role, person_id) == 1


async def test_grant_revoke_grant_reuses_id(
    role, database, person_repo, role_repos, make_person_data
) -> None:
    repo = role_repos[role]
    person_id = await person_repo.create(make_person_data(1))
    original = await repo.grant(person_id)
    await repo.revoke(original)
    assert await repo.grant(person_id) == original
    assert (await repo.get_by_id(original)).active is True
    assert await _row_count(database, role, person_id) == 1


async def test_revoke_unknown_returns_zero(role, role_repos) -> None:
    assert await role_repos[role].revoke(12345) == 0


async def test_get_by_id_any_state(role, person_repo, role_repos, make_person_data) -> None:
    repo = role_repos[role]
    person_id = await person_repo.create(make_person_data(1))
    membership_id = await repo.grant(person_id)
    await repo.revoke(membership_id)
    membership = await repo.get_by_id(membership_id)
    assert membership is not None
    assert membership.active is False
    assert membership.person_id == person_id
    assert await repo.get_by_id(membership_id + 100) is None


async def test_list_paged(role, person_repo, role_repos, make_person_data) -> None:
    """Active members only, ordered by last then first name, person fields only."""
    repo = role_repos[role]
    for n in range(25):
        person_id = await person_repo.create(
            make_person_data(n, last_name=f"Member{n:02d}")
        )
        await repo.grant(person_id)
    revoked_person = await person_repo.create(make_person_data(99, last_name="Aaaa"))
    await repo.revoke(await repo.grant(revoked_person))

    page = await repo.list_paged(2, 10)
    assert page.total == 25
    assert [m.last_name for m in page.items] == [f"Member{n:02d}" for n in range(10, 20)]
    assert not hasattr(page.items[0], "membership_id")

    searched = await repo.list_paged(1, 10, "member2")
    assert [m.last_name for m in searched.items] == [
        "Member20", "Member21", "Member22", "Member23", "Member24",
    ]
    assert searched.total == 5


async def test_update_not_supported(role, role_repos) -> None:
    with pytest.raises(NotSupportedException) as exc_info:
        await role_repos[role].update(1, 2)
    assert exc_info.value.details == {"operation": f"{role.value}.update"}


async def test_list_all_not_supported(role, role_repos) -> None:
    with pytest.raises(NotSupportedException):
        await role_repos[role].list_all()
