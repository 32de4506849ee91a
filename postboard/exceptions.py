"""
Service-level errors, each carrying the HTTP status it maps to.
"""
from fastapi import status


class PostboardError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server Error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(PostboardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class NotFound(PostboardError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Forbidden(PostboardError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not authorized"


class ValidationError(PostboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InternalError(PostboardError):
    pass
