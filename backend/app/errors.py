"""Domain errors surfaced to API callers.

Each condition is an ``HTTPException`` so that stores and access checks can
raise them directly and FastAPI renders ``{"detail": ...}`` with the right
status code.
"""
from fastapi import HTTPException, status


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Invalid survey data"):
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class Unauthorized(HTTPException):
    def __init__(self, detail: str = "Not the owner of this survey"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class Conflict(HTTPException):
    def __init__(self, detail: str = "You have already taken this survey"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
