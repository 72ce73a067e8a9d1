"""
Application Errors

Raised by use cases and repository adapters; translated into HTTP errors
by the API layer.
"""


class AppError(Exception):
    """Base application error carrying a machine-readable code"""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class ConflictError(AppError):
    """Duplicate email/username/slug/domain - user-actionable, no retry"""


class NotFoundError(AppError):
    """Target organization, user or membership does not exist"""


class FatalIntegrityError(AppError):
    """Stored data violates a global invariant; requires operator attention"""


class CollaboratorFailure(AppError):
    """An external collaborator (e.g. email delivery) failed"""
