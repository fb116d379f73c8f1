from fastapi import status

from .base import AppError


class NotAuthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self):
        detail = "Unauthorized"
        super().__init__(detail)


class InvalidVerificationToken(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        detail = "The sign-in link is invalid or has expired."
        super().__init__(detail)


class LoginEmailNotSent(AppError):
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, email: str):
        detail = f"Could not deliver the sign-in email to {email}."
        super().__init__(detail)
