import pytest
from uuid import uuid4

from src.app.errors import FatalIntegrityError
from src.app.use_cases.organizations import FindOrganizationByAutoAcceptDomainUseCase
from src.domain.entities import Organization


@pytest.mark.asyncio
async def test_no_organization_for_domain(mock_uow):
    # Act
    result = await FindOrganizationByAutoAcceptDomainUseCase(mock_uow).execute("bob@acme.com")

    # Assert
    assert result is None
    mock_uow.organizations.find_by_auto_accept_email.assert_awaited_once_with("acme.com")


@pytest.mark.asyncio
async def test_single_organization_for_domain(mock_uow):
    # Arrange
    organization = Organization(id=uuid4(), name="Acme", slug="acme")
    mock_uow.organizations.find_by_auto_accept_email.return_value = [organization]

    # Act
    result = await FindOrganizationByAutoAcceptDomainUseCase(mock_uow).execute("Bob@ACME.com")

    # Assert
    assert result.id == str(organization.id)
    mock_uow.organizations.find_by_auto_accept_email.assert_awaited_once_with("acme.com")


@pytest.mark.asyncio
async def test_multiple_organizations_for_domain_is_fatal(mock_uow):
    """Never pick one when the stored data breaks the one-domain rule"""
    # Arrange
    mock_uow.organizations.find_by_auto_accept_email.return_value = [
        Organization(id=uuid4(), name="Acme"),
        Organization(id=uuid4(), name="Acme Duplicate"),
    ]

    # Act & Assert
    with pytest.raises(FatalIntegrityError) as exc_info:
        await FindOrganizationByAutoAcceptDomainUseCase(mock_uow).execute("bob@acme.com")

    assert exc_info.value.code == "MULTIPLE_ORGANIZATIONS_FOR_DOMAIN"


@pytest.mark.asyncio
async def test_email_without_domain_matches_nothing(mock_uow):
    result = await FindOrganizationByAutoAcceptDomainUseCase(mock_uow).execute("bob")

    assert result is None
    mock_uow.organizations.find_by_auto_accept_email.assert_not_awaited()
