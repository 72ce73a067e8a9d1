from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError
from src.api.utils.admin_auth import verify_admin_api_key
from src.api.utils.ids import parse_uuid
from src.app.errors import ConflictError, NotFoundError
from src.app.services.email_service import IEmailService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.organizations import FindOrganizationUseCase, OrganizationView
from src.app.use_cases.organization_users import (
    AddOrganizationUserUseCase,
    CreateOrganizationUserCommand,
    ListOrganizationUsersUseCase,
    OrganizationRef,
    OrganizationUserResponse,
    RemoveOrganizationUserUseCase,
    UpdateOrganizationUserCommand,
    UpdateOrganizationUserUseCase,
)
from src.domain.entities import MembershipRole
from src.depends import get_email_service, get_unit_of_work

router = APIRouter(
    prefix="/organizations/{organization_id}/users",
    tags=["Organization Users"],
    dependencies=[Depends(verify_admin_api_key)],
)


class CreateOrganizationUserRequest(BaseModel):
    """
    Add organization user HTTP request payload
    """

    email: EmailStr = Field(..., description="Email of the new user")
    username: Optional[str] = Field(default=None, min_length=1, max_length=255)
    organization_role: MembershipRole = MembershipRole.member
    auto_accept: bool = True

    name: Optional[str] = None
    locale: Optional[str] = None
    time_zone: Optional[str] = None
    week_start: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None


class UpdateOrganizationUserRequest(BaseModel):
    """
    Update organization user HTTP request payload; omitted fields are untouched
    """

    email: Optional[EmailStr] = None
    username: Optional[str] = Field(default=None, min_length=1, max_length=255)
    name: Optional[str] = None
    locale: Optional[str] = None
    time_zone: Optional[str] = None
    week_start: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None

    organization_role: Optional[MembershipRole] = None
    accepted: Optional[bool] = None


async def _get_organization(uow: UnitOfWork, organization_id: UUID) -> OrganizationView:
    organization = await FindOrganizationUseCase(uow).execute(organization_id)
    if organization is None:
        raise ClientError(
            NotFoundError("ORGANIZATION_NOT_FOUND", "Organization not found"),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return organization


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=List[OrganizationUserResponse],
)
async def list_organization_users(
    organization_id: str,
    emails: Optional[List[str]] = Query(default=None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Organization Users

    Optional repeated `emails` query parameter restricts the result.

    Raises:
        - 400 Bad Request: Invalid organization ID format
        - 404 Not Found: ORGANIZATION_NOT_FOUND
    """
    organization_uuid = parse_uuid(organization_id, "INVALID_ORGANIZATION_ID", "organization ID")
    await _get_organization(uow, organization_uuid)

    return await ListOrganizationUsersUseCase(uow).execute(organization_uuid, emails)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=OrganizationUserResponse,
)
async def add_organization_user(
    organization_id: str,
    request: CreateOrganizationUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_service: IEmailService = Depends(get_email_service),
):
    """
    Add Organization User

    Creates the user inside the organization and emails them an invitation.

    Raises:
        - 400 Bad Request: Invalid organization ID format
        - 404 Not Found: ORGANIZATION_NOT_FOUND
        - 409 Conflict: EMAIL_ALREADY_EXISTS, USERNAME_TAKEN, USER_CONFLICT
    """
    organization_uuid = parse_uuid(organization_id, "INVALID_ORGANIZATION_ID", "organization ID")
    organization = await _get_organization(uow, organization_uuid)

    use_case = AddOrganizationUserUseCase(uow, email_service)
    try:
        return await use_case.execute(
            OrganizationRef(id=organization_uuid, name=organization.name),
            CreateOrganizationUserCommand(**request.model_dump()),
        )
    except ConflictError as error:
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)


@router.patch(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationUserResponse,
)
async def update_organization_user(
    organization_id: str,
    user_id: str,
    request: UpdateOrganizationUserRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Organization User

    Raises:
        - 400 Bad Request: Invalid organization or user ID format
        - 404 Not Found: USER_NOT_FOUND, MEMBERSHIP_NOT_FOUND
        - 409 Conflict: USERNAME_TAKEN, USER_CONFLICT, CANNOT_DEMOTE_OWNER
    """
    organization_uuid = parse_uuid(organization_id, "INVALID_ORGANIZATION_ID", "organization ID")
    user_uuid = parse_uuid(user_id, "INVALID_USER_ID", "user ID")

    use_case = UpdateOrganizationUserUseCase(uow)
    try:
        return await use_case.execute(
            organization_uuid,
            user_uuid,
            UpdateOrganizationUserCommand(**request.model_dump(exclude_unset=True)),
        )
    except ConflictError as error:
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    except NotFoundError as error:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationUserResponse,
)
async def remove_organization_user(
    organization_id: str,
    user_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Organization User

    Raises:
        - 400 Bad Request: Invalid organization or user ID format
        - 404 Not Found: USER_NOT_FOUND (including users removed earlier)
    """
    organization_uuid = parse_uuid(organization_id, "INVALID_ORGANIZATION_ID", "organization ID")
    user_uuid = parse_uuid(user_id, "INVALID_USER_ID", "user ID")

    try:
        return await RemoveOrganizationUserUseCase(uow).execute(organization_uuid, user_uuid)
    except NotFoundError as error:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
