"""Error classes for the login boundary and the responses they map to.

Every stage terminates its own failures by returning ``error.to_response()``;
nothing above the stage rewrites them.
"""

from typing import Any, Dict, List, Optional

from fastapi import status
from fastapi.responses import JSONResponse


class ServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"
    headers: Optional[Dict[str, str]] = None

    def __init__(self, detail: Optional[str] = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)

    def body(self) -> Dict[str, Any]:
        return {"detail": self.detail}

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.body(), headers=self.headers)


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Validation failed"

    def __init__(self, errors: List[Dict[str, str]], detail: Optional[str] = None):
        self.errors = errors
        super().__init__(detail)

    def body(self) -> Dict[str, Any]:
        return {"detail": self.detail, "errors": self.errors}


class AuthenticationError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Invalid credentials"
    headers = {"WWW-Authenticate": "Bearer"}


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    detail = "Identifier already registered"


class InternalError(ServiceError):
    pass
