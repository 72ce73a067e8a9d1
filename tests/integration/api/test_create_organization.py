import pytest
from httpx import AsyncClient
from sqlmodel import select
from uuid import UUID

from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_create_organization_with_new_owner(
    client: AsyncClient, db_session, admin_headers, test_data
):
    """New owner jane@acme.com in an org auto-accepting acme.com

    Given no user exists for jane@acme.com
    When an organization auto-accepting acme.com is created with her as new owner
    Then her tenant-scoped username is "jane"
    And exactly one accepted OWNER membership exists
    """
    response = await client.post(
        "/organizations/with-new-owner",
        json={
            "organization": test_data.get_copy("acme_organization"),
            "owner": {"email": "jane@acme.com"},
        },
        headers=admin_headers,
    )

    assert response.status_code == 201
    data = response.json()
    organization_id = data["organization"]["id"]

    assert data["org_owner"]["email"] == "jane@acme.com"
    assert data["org_owner"]["username"] == "jane"
    assert data["org_owner"]["organization_id"] == organization_id
    assert exclude_keys(data["owner_profile"]) == {"username": "jane"}
    assert data["organization"]["slug"] == "acme"
    assert data["organization"]["metadata"] == test_data.get("acme_metadata")
    assert exclude_keys(data["organization"]["settings"], {"org_auto_accept_email"}) == {
        "is_admin_reviewed": True,
        "is_organization_verified": True,
        "is_organization_configured": False,
    }

    from src.domain.entities import Membership, MembershipRole

    stmt = select(Membership).where(Membership.organization_id == UUID(organization_id))
    result = await db_session.exec(stmt)
    memberships = result.all()
    assert len(memberships) == 1
    assert str(memberships[0].user_id) == data["org_owner"]["id"]
    assert memberships[0].role == MembershipRole.owner
    assert memberships[0].accepted is True


@pytest.mark.asyncio
async def test_create_organization_with_existing_owner(
    client: AsyncClient, db_session, admin_headers, test_data
):
    # Create a user outside any organization
    from src.domain.entities import Membership, MembershipRole, Profile, User

    user = User(email="jane@gmail.com", username="janedoe")
    db_session.add(user)
    await db_session.commit()
    user_id = str(user.id)

    response = await client.post(
        "/organizations/with-existing-owner",
        json={
            "organization": test_data.get_copy("acme_organization"),
            "owner": {"id": user_id, "email": "jane@gmail.com", "non_org_username": "janedoe"},
        },
        headers=admin_headers,
    )

    assert response.status_code == 201
    data = response.json()
    organization_id = data["organization"]["id"]
    assert data["owner_profile"]["username"] == "jane-gmail"
    assert data["owner_profile"]["organization_id"] == organization_id

    stmt = select(Profile).where(Profile.user_id == UUID(user_id))
    result = await db_session.exec(stmt)
    profile = result.one()
    assert profile.previous_username == "janedoe"

    stmt = select(User).where(User.id == UUID(user_id))
    result = await db_session.exec(stmt)
    assert result.one().moved_to_profile_id == profile.id

    stmt = select(Membership).where(Membership.organization_id == UUID(organization_id))
    result = await db_session.exec(stmt)
    membership = result.one()
    assert membership.role == MembershipRole.owner
    assert membership.accepted is True


@pytest.mark.asyncio
async def test_create_organization_with_unknown_existing_owner(
    client: AsyncClient, db_session, admin_headers, test_data
):
    response = await client.post(
        "/organizations/with-existing-owner",
        json={
            "organization": test_data.get_copy("acme_organization"),
            "owner": {"id": "00000000-0000-0000-0000-000000000001", "email": "ghost@acme.com"},
        },
        headers=admin_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"

    # Provisioning is all-or-nothing
    from src.domain.entities import Organization

    result = await db_session.exec(select(Organization))
    assert result.all() == []


@pytest.mark.asyncio
async def test_create_organization_invalid_owner_id(
    client: AsyncClient, admin_headers, test_data
):
    response = await client.post(
        "/organizations/with-existing-owner",
        json={
            "organization": test_data.get_copy("acme_organization"),
            "owner": {"id": "not-a-uuid", "email": "jane@acme.com"},
        },
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_USER_ID"


@pytest.mark.asyncio
async def test_create_organization_new_owner_email_exists(
    client: AsyncClient, admin_headers, test_data
):
    first = await client.post(
        "/organizations/with-new-owner",
        json=test_data.provisioning_request("acme_organization", "jane@acme.com"),
        headers=admin_headers,
    )
    assert first.status_code == 201

    second = await client.post(
        "/organizations/with-new-owner",
        json=test_data.provisioning_request("globex_organization", "jane@acme.com"),
        headers=admin_headers,
    )

    assert second.status_code == 409
    assert second.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_create_organization_slug_taken(client: AsyncClient, admin_headers, test_data):
    first = await client.post(
        "/organizations/with-new-owner",
        json=test_data.provisioning_request("acme_organization", "jane@acme.com"),
        headers=admin_headers,
    )
    assert first.status_code == 201

    second = await client.post(
        "/organizations/with-new-owner",
        json=test_data.provisioning_request("globex_organization", "hank@globex.io", slug="acme"),
        headers=admin_headers,
    )

    assert second.status_code == 409
    assert second.json()["error"]["code"] == "SLUG_TAKEN"


@pytest.mark.asyncio
async def test_auto_accept_domain_is_unique_across_organizations(
    client: AsyncClient, db_session, admin_headers, test_data
):
    """Two organizations can never both auto-accept the same domain"""
    first = await client.post(
        "/organizations/with-new-owner",
        json=test_data.provisioning_request("acme_organization", "jane@acme.com"),
        headers=admin_headers,
    )
    assert first.status_code == 201

    second = await client.post(
        "/organizations/with-new-owner",
        json=test_data.provisioning_request(
            "globex_organization", "hank@globex.io", auto_accept_email="ACME.com"
        ),
        headers=admin_headers,
    )

    assert second.status_code == 409
    assert second.json()["error"]["code"] == "AUTO_ACCEPT_DOMAIN_TAKEN"

    from src.domain.entities import User

    result = await db_session.exec(select(User).where(User.email == "hank@globex.io"))
    assert result.one_or_none() is None


@pytest.mark.asyncio
@pytest.mark.parametrize("team_billing_enabled", [True])
async def test_create_organization_with_team_billing_enabled(
    client: AsyncClient, admin_headers, test_data, team_billing_enabled
):
    """Slug waits in metadata until billing promotes it"""
    response = await client.post(
        "/organizations/with-new-owner",
        json=test_data.provisioning_request("acme_organization", "jane@acme.com"),
        headers=admin_headers,
    )

    assert response.status_code == 201
    organization = response.json()["organization"]
    assert organization["slug"] is None
    assert organization["metadata"]["requested_slug"] == "acme"


@pytest.mark.asyncio
async def test_create_organization_requires_admin_api_key(client: AsyncClient, test_data):
    payload = test_data.provisioning_request("acme_organization", "jane@acme.com")

    missing = await client.post("/organizations/with-new-owner", json=payload)
    wrong = await client.post(
        "/organizations/with-new-owner", json=payload, headers={"X-Admin-API-Key": "nope"}
    )

    assert missing.status_code == 401
    assert missing.json()["error"]["code"] == "UNAUTHORIZED"
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "INVALID_API_KEY"
