from typing import Any, Dict, Optional

class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

class NotFoundError(AppException):
    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            message=f"{resource} {identifier} not found",
            status_code=404,
            error_code="NOT_FOUND",
            details={"resource": resource, "id": str(identifier)}
        )

class ConflictError(AppException):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details
        )

class InvalidInputError(AppException):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_INPUT",
            details=details
        )

class NoWorkingHoursError(AppException):
    """Raised when a requested leave range contains no scheduled working hours."""
    def __init__(self, start_date: Any, end_date: Any):
        super().__init__(
            message="The selected dates contain no scheduled working hours.",
            status_code=422,
            error_code="NO_WORKING_HOURS",
            details={"start_date": str(start_date), "end_date": str(end_date)}
        )
