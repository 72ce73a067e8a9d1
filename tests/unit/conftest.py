import pytest
from unittest.mock import AsyncMock, MagicMock


def _returns_first_arg(*args, **kwargs):
    return args[0]


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories; creates/updates echo their input"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.organizations = MagicMock()
    uow.organizations.create = AsyncMock(side_effect=_returns_first_arg)
    uow.organizations.get_by_id = AsyncMock(return_value=None)
    uow.organizations.get_by_id_with_settings = AsyncMock(return_value=None)
    uow.organizations.get_settings = AsyncMock(return_value=None)
    uow.organizations.get_by_slug = AsyncMock(return_value=None)
    uow.organizations.find_by_auto_accept_email = AsyncMock(return_value=[])

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=_returns_first_arg)
    uow.users.update = AsyncMock(side_effect=_returns_first_arg)

    uow.memberships = MagicMock()
    uow.memberships.get_by_user_and_organization = AsyncMock(return_value=None)
    uow.memberships.create = AsyncMock(side_effect=_returns_first_arg)
    uow.memberships.update = AsyncMock(side_effect=_returns_first_arg)

    uow.profiles = MagicMock()
    uow.profiles.create = AsyncMock(side_effect=_returns_first_arg)

    uow.organization_users = MagicMock()
    uow.organization_users.get_organization_users = AsyncMock(return_value=[])
    uow.organization_users.get_organization_user = AsyncMock(return_value=None)
    uow.organization_users.get_organization_user_by_email = AsyncMock(return_value=None)
    uow.organization_users.get_organization_user_by_username = AsyncMock(return_value=None)
    uow.organization_users.update_organization_user = AsyncMock()
    uow.organization_users.delete_organization_user = AsyncMock()

    return uow


@pytest.fixture
def org_data_payload():
    return {
        "name": "Acme",
        "slug": "acme",
        "is_organization_configured": False,
        "is_organization_admin_reviewed": True,
        "auto_accept_email": "acme.com",
        "seats": None,
        "price_per_seat": None,
        "is_platform": False,
    }
