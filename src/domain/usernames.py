"""
Tenant-scoped username derivation.
"""

from typing import Optional

from slugify import slugify


def get_email_domain(email: str) -> str:
    """Substring after the last '@' (empty when there is none)"""
    if "@" not in email:
        return ""
    return email.rsplit("@", 1)[-1]


def get_org_username_from_email(email: str, auto_accept_email_domain: Optional[str]) -> str:
    """
    Derive the username a user gets inside an organization.

    When the email's domain is the organization's auto-accept domain the
    domain is dropped ("jane@acme.com" -> "jane"); otherwise the first label
    of the domain disambiguates the local part ("jane@gmail.com" -> "jane-gmail").
    """
    email_user, _, email_domain = email.rpartition("@")
    if not email_user:
        email_user, email_domain = email, ""

    if auto_accept_email_domain and email_domain.lower() == auto_accept_email_domain.lower():
        return slugify(email_user)
    return slugify(f"{email_user}-{email_domain.split('.')[0]}")
