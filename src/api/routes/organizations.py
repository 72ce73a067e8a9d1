from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.api.utils.ids import parse_uuid
from src.app.errors import ConflictError, FatalIntegrityError, NotFoundError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.organizations import (
    CreateOrganizationWithExistingOwnerResponse,
    CreateOrganizationWithExistingOwnerUseCase,
    CreateOrganizationWithNewOwnerResponse,
    CreateOrganizationWithNewOwnerUseCase,
    ExistingOwner,
    FindOrganizationByAutoAcceptDomainUseCase,
    FindOrganizationUseCase,
    NewOwner,
    OrganizationData,
    OrganizationView,
)
from src.depends import get_team_billing_enabled, get_unit_of_work

router = APIRouter(
    prefix="/organizations",
    tags=["Organizations"],
    dependencies=[Depends(verify_admin_api_key)],
)


class ExistingOwnerRequest(BaseModel):
    """Owner that already has an account"""

    id: str = Field(..., description="Existing user ID")
    email: EmailStr
    non_org_username: Optional[str] = Field(
        default=None, description="Username the user had before joining the organization"
    )


class CreateWithExistingOwnerRequest(BaseModel):
    """
    Create organization HTTP request payload (existing owner)
    """

    organization: OrganizationData
    owner: ExistingOwnerRequest


class NewOwnerRequest(BaseModel):
    """Owner without a prior account"""

    email: EmailStr


class CreateWithNewOwnerRequest(BaseModel):
    """
    Create organization HTTP request payload (new owner)
    """

    organization: OrganizationData
    owner: NewOwnerRequest


@router.post(
    "/with-existing-owner",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateOrganizationWithExistingOwnerResponse,
)
async def create_organization_with_existing_owner(
    request: CreateWithExistingOwnerRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    team_billing_enabled: bool = Depends(get_team_billing_enabled),
):
    """
    Create Organization With Existing Owner

    Creates the organization, attaches the existing user under a
    tenant-scoped username and makes them the accepted OWNER.

    Raises:
        - 400 Bad Request: Invalid owner ID format
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: SLUG_TAKEN, AUTO_ACCEPT_DOMAIN_TAKEN, USERNAME_TAKEN
    """
    owner_id = parse_uuid(request.owner.id, "INVALID_USER_ID", "user ID")

    use_case = CreateOrganizationWithExistingOwnerUseCase(uow, team_billing_enabled)
    try:
        return await use_case.execute(
            request.organization,
            ExistingOwner(
                id=owner_id,
                email=request.owner.email,
                non_org_username=request.owner.non_org_username,
            ),
        )
    except ConflictError as error:
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    except NotFoundError as error:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)


@router.post(
    "/with-new-owner",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateOrganizationWithNewOwnerResponse,
)
async def create_organization_with_new_owner(
    request: CreateWithNewOwnerRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    team_billing_enabled: bool = Depends(get_team_billing_enabled),
):
    """
    Create Organization With New Owner

    Creates the organization and a brand-new owner account whose username is
    derived from the email and the auto-accept domain.

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 409 Conflict: EMAIL_ALREADY_EXISTS, SLUG_TAKEN, AUTO_ACCEPT_DOMAIN_TAKEN
    """
    use_case = CreateOrganizationWithNewOwnerUseCase(uow, team_billing_enabled)
    try:
        return await use_case.execute(
            request.organization, NewOwner(email=request.owner.email)
        )
    except ConflictError as error:
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)


@router.get(
    "/by-auto-accept-domain",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationView,
)
async def find_organization_by_auto_accept_domain(
    email: str = Query(..., description="Email whose domain is looked up"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Find Organization By Auto-Accept Domain

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: ORGANIZATION_NOT_FOUND
        - 500 Internal Server Error: MULTIPLE_ORGANIZATIONS_FOR_DOMAIN (data corruption)
    """
    use_case = FindOrganizationByAutoAcceptDomainUseCase(uow)
    try:
        organization = await use_case.execute(email)
    except FatalIntegrityError as error:
        raise ServerError(error)

    if organization is None:
        raise ClientError(
            NotFoundError(
                "ORGANIZATION_NOT_FOUND", "No organization auto-accepts this email domain"
            ),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return organization


@router.get(
    "/{organization_id}",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationView,
)
async def find_organization(
    organization_id: str,
    include_settings: bool = Query(default=False),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Find Organization

    Raises:
        - 400 Bad Request: Invalid organization ID format
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: ORGANIZATION_NOT_FOUND
    """
    organization_uuid = parse_uuid(organization_id, "INVALID_ORGANIZATION_ID", "organization ID")

    organization = await FindOrganizationUseCase(uow).execute(
        organization_uuid, include_settings=include_settings
    )
    if organization is None:
        raise ClientError(
            NotFoundError("ORGANIZATION_NOT_FOUND", "Organization not found"),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return organization
