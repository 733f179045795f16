# backend/services/errors.py
"""
Error taxonomy shared by every service.

Each class carries the HTTP status it is rendered with; main.py installs one
exception handler for AppError that turns it into {"detail": message}.
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400


class NotAuthenticated(AppError):
    status_code = 401


class NotAuthorized(AppError):
    status_code = 403


class NotFound(AppError):
    status_code = 404


class BusinessRuleViolation(AppError):
    status_code = 400
