# app/core/exceptions.py

from fastapi import status


class ApplicationError(Exception):
    """HTTP 의미를 가진 기본 애플리케이션 에러"""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "application_error"

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.message = message


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class UniqueViolationError(ApplicationError):
    status_code = status.HTTP_409_CONFLICT
    code = "unique_violation"


class UsernameAlreadyExistsError(UniqueViolationError):
    code = "username_already_exists"


class ConnectivityError(ApplicationError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "connectivity_error"


class UrlConstructionError(ApplicationError):
    code = "url_construction_error"


class ImmutableFieldError(ApplicationError):
    status_code = status.HTTP_409_CONFLICT
    code = "immutable_field"
