"""
Domain errors raised by services and store boundaries.

Every error carries a machine-readable ``code`` and the HTTP status the API
layer answers with. The exception handlers in ``api.internal.utils.exceptions``
render them through ``BaseResponse.failure``.
"""


class CivicError(Exception):
    code: str = "error"
    status_code: int = 400
    default_message: str = "An error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationRequired(CivicError):
    """An action needing an identity was attempted anonymously."""

    code = "unauthorized"
    status_code = 401
    default_message = "authentication required"


class ValidationFailure(CivicError):
    """Missing or malformed input, e.g. password mismatch or a blank field."""

    code = "bad_request"
    status_code = 400
    default_message = "Invalid request data"


class AuthorizationDenied(CivicError):
    """The identity is known but not allowed to do this."""

    code = "forbidden"
    status_code = 403
    default_message = "forbidden"


class NotFound(CivicError):
    code = "not_found"
    status_code = 404
    default_message = "Not found"


class RemoteFailure(CivicError):
    """
    Any failure reported by the identity, issue or profile store, or the
    authority-code service. Treated as opaque and never retried.
    """

    code = "remote_failure"
    status_code = 502
    default_message = "The request could not be completed. Please try again."

    def __init__(self, message: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
