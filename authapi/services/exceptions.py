# File: authapi/services/exceptions.py

"""
Errors raised by the credential service.

Each carries the HTTP status and the public message the API returns;
nothing else about the failure reaches the caller.
"""

from fastapi import status


class AuthError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateEmailError(AuthError):
    status_code = status.HTTP_409_CONFLICT
    message = "Email already registered"


class InvalidCredentialsError(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid email or password"


class StorageError(AuthError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Could not complete the request"
