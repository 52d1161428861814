# petsocial/core/errors.py
"""Error kinds raised by the domain services.

Services never build HTTP responses; they raise one of these and the handlers
registered in ``create_app`` translate it into a status code and JSON body.
"""
from typing import Dict, List, Optional


class ApiError(Exception):
    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"error_code": self.error_code, "message": self.message}


class ValidationError(ApiError):
    """One or more fields were rejected. Every violation is kept, not just the first."""
    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(self, messages: List[Dict[str, str]]):
        super().__init__("; ".join(f"{m['path']}: {m['message']}" for m in messages))
        self.messages = messages

    @classmethod
    def single(cls, path: str, message: str) -> "ValidationError":
        return cls([{"path": path, "message": message}])

    def to_dict(self):
        return {"messages": self.messages}


class NotFoundError(ApiError):
    error_code = "NOT_FOUND"


class AuthenticationError(ApiError):
    status_code = 401
    error_code = "AUTHENTICATION_FAILED"


class AuthorizationError(ApiError):
    status_code = 401
    error_code = "INSUFFICIENT_PERMISSIONS"


class DomainRuleError(ApiError):
    """A request that is well formed but breaks a rule of the social graph."""
    status_code = 400
    error_code = "DOMAIN_RULE_VIOLATION"

    def __init__(self, message: str, fail_at: Optional[str] = None):
        super().__init__(message)
        self.fail_at = fail_at

    def to_dict(self):
        return {"fail_at": self.fail_at, "message": self.message}
