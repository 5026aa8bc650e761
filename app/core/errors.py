"""Service-layer errors. Each carries the HTTP status the API maps it to."""


class ServiceError(Exception):
    """Base error raised by services; rendered as {"detail": message}."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """Missing or malformed input. Nothing was written."""

    status_code = 400


class Unauthenticated(ServiceError):
    status_code = 401


class NoSuchAccount(Unauthenticated):
    pass


class NoPasswordSet(Unauthenticated):
    pass


class BadCredentials(Unauthenticated):
    pass


class Forbidden(ServiceError):
    status_code = 403


class NotFound(ServiceError):
    status_code = 404


class Conflict(ServiceError):
    """A unique constraint rejected the write."""

    status_code = 409
