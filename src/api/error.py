"""API error handling

Maps use case errors to HTTP responses of the form
{"error": {"code": ..., "message": ...}}.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error

NOT_FOUND_CODES = {
    "CUSTOMER_NOT_FOUND",
    "ITEM_NOT_FOUND",
    "WORK_LINE_NOT_FOUND",
    "INVOICE_NOT_FOUND",
}

CONFLICT_CODES = {
    "CUSTOMER_IN_USE",
    "ITEM_IN_USE",
    "WORK_LINE_INVOICED",
    "INVOICE_NUMBER_CONFLICT",
    "CONSISTENCY_ERROR",
}


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    @classmethod
    def from_error(cls, error: Error) -> "ClientError":
        """Pick the HTTP status from the error code"""
        if error.code in NOT_FOUND_CODES:
            return cls(error, status_code=status.HTTP_404_NOT_FOUND)
        if error.code in CONFLICT_CODES:
            return cls(error, status_code=status.HTTP_409_CONFLICT)
        return cls(error)


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.error.code, "message": exc.error.message}},
    )
