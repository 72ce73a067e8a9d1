import pytest
from uuid import uuid4

from src.app.errors import ConflictError, NotFoundError
from src.app.repositories.organization_user_repository import OrganizationUser
from src.app.use_cases.organization_users import (
    UpdateOrganizationUserCommand,
    UpdateOrganizationUserUseCase,
)
from src.domain.entities import Membership, MembershipRole, Profile, User

ORG_ID = uuid4()


def _member(email: str, username: str, account_username: str = None) -> OrganizationUser:
    user = User(id=uuid4(), email=email, username=account_username or username)
    return OrganizationUser(
        user, Profile(user_id=user.id, organization_id=ORG_ID, username=username)
    )


@pytest.fixture
def bob():
    return _member("bob@acme.com", "bob")


@pytest.fixture
def apply_patch(mock_uow, bob):
    """update_organization_user writes the username to the profile, the rest to the user"""

    async def update_organization_user(organization_id, user_id, data):
        data = dict(data)
        if "username" in data:
            bob.profile.username = data.pop("username")
        for key, value in data.items():
            setattr(bob.user, key, value)
        return bob

    mock_uow.organization_users.get_organization_user.return_value = bob
    mock_uow.organization_users.update_organization_user.side_effect = update_organization_user


@pytest.mark.asyncio
async def test_update_keeping_own_username_is_not_a_conflict(mock_uow, bob, apply_patch):
    # Arrange
    mock_uow.organization_users.get_organization_user_by_username.return_value = bob

    # Act
    result = await UpdateOrganizationUserUseCase(mock_uow).execute(
        ORG_ID, bob.user.id, UpdateOrganizationUserCommand(username="bob", name="Bob")
    )

    # Assert
    assert result.username == "bob"
    assert result.name == "Bob"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_reports_organization_username_not_account_username(mock_uow):
    """A user who joined with an existing account is renamed inside the organization only"""
    # Arrange
    jane = _member("jane@gmail.com", "jane-gmail", account_username="janedoe")
    mock_uow.organization_users.get_organization_user.return_value = jane

    async def update_organization_user(organization_id, user_id, data):
        jane.profile.username = data["username"]
        return jane

    mock_uow.organization_users.update_organization_user.side_effect = update_organization_user

    # Act
    result = await UpdateOrganizationUserUseCase(mock_uow).execute(
        ORG_ID, jane.user.id, UpdateOrganizationUserCommand(username="jane")
    )

    # Assert
    assert result.username == "jane"
    assert result.organization_id == str(ORG_ID)
    assert jane.user.username == "janedoe"


@pytest.mark.asyncio
async def test_update_username_taken_by_other_user(mock_uow, bob, apply_patch):
    # Arrange
    mock_uow.organization_users.get_organization_user_by_username.return_value = _member(
        "alice@acme.com", "alice"
    )

    # Act & Assert
    with pytest.raises(ConflictError) as exc_info:
        await UpdateOrganizationUserUseCase(mock_uow).execute(
            ORG_ID, bob.user.id, UpdateOrganizationUserCommand(username="alice")
        )

    assert exc_info.value.code == "USERNAME_TAKEN"
    mock_uow.organization_users.update_organization_user.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_ignores_none_values(mock_uow, bob, apply_patch):
    # Act
    await UpdateOrganizationUserUseCase(mock_uow).execute(
        ORG_ID, bob.user.id, UpdateOrganizationUserCommand(bio="Hello", name=None)
    )

    # Assert
    _, _, data = mock_uow.organization_users.update_organization_user.await_args.args
    assert data == {"bio": "Hello"}


@pytest.mark.asyncio
async def test_update_user_not_in_organization(mock_uow):
    # Act & Assert
    with pytest.raises(NotFoundError) as exc_info:
        await UpdateOrganizationUserUseCase(mock_uow).execute(
            ORG_ID, uuid4(), UpdateOrganizationUserCommand(name="Ghost")
        )

    assert exc_info.value.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_role(mock_uow, bob, apply_patch):
    # Arrange
    membership = Membership(
        user_id=bob.user.id, organization_id=ORG_ID, role=MembershipRole.member
    )
    mock_uow.memberships.get_by_user_and_organization.return_value = membership

    # Act
    result = await UpdateOrganizationUserUseCase(mock_uow).execute(
        ORG_ID,
        bob.user.id,
        UpdateOrganizationUserCommand(organization_role=MembershipRole.admin, accepted=True),
    )

    # Assert
    assert result.username == "bob"
    assert membership.role == MembershipRole.admin
    assert membership.accepted is True
    mock_uow.memberships.update.assert_awaited_once_with(membership)
    mock_uow.organization_users.update_organization_user.assert_not_awaited()
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "command",
    [
        UpdateOrganizationUserCommand(organization_role=MembershipRole.member),
        UpdateOrganizationUserCommand(accepted=False),
    ],
)
async def test_owner_cannot_be_demoted(mock_uow, bob, apply_patch, command):
    """The owner keeps an accepted OWNER membership"""
    # Arrange
    owner_membership = Membership(
        user_id=bob.user.id, organization_id=ORG_ID, role=MembershipRole.owner, accepted=True
    )
    mock_uow.memberships.get_by_user_and_organization.return_value = owner_membership

    # Act & Assert
    with pytest.raises(ConflictError) as exc_info:
        await UpdateOrganizationUserUseCase(mock_uow).execute(ORG_ID, bob.user.id, command)

    assert exc_info.value.code == "CANNOT_DEMOTE_OWNER"
    assert owner_membership.role == MembershipRole.owner
    assert owner_membership.accepted is True
    mock_uow.memberships.update.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_owner_can_stay_accepted(mock_uow, bob, apply_patch):
    # Arrange
    mock_uow.memberships.get_by_user_and_organization.return_value = Membership(
        user_id=bob.user.id, organization_id=ORG_ID, role=MembershipRole.owner, accepted=True
    )

    # Act
    await UpdateOrganizationUserUseCase(mock_uow).execute(
        ORG_ID,
        bob.user.id,
        UpdateOrganizationUserCommand(organization_role=MembershipRole.owner, accepted=True),
    )

    # Assert
    mock_uow.memberships.update.assert_awaited_once()
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_role_without_membership(mock_uow, bob, apply_patch):
    with pytest.raises(NotFoundError) as exc_info:
        await UpdateOrganizationUserUseCase(mock_uow).execute(
            ORG_ID, bob.user.id, UpdateOrganizationUserCommand(accepted=True)
        )

    assert exc_info.value.code == "MEMBERSHIP_NOT_FOUND"
