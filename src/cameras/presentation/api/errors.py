"""
Error envelope {error, code} and the handlers that produce it.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from ....common.exceptions import InvalidQueryError
from ....common.logging import setup_logger
from ....common.schemas import ErrorResponse

logger = setup_logger(__name__)


def error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, code=code).model_dump(),
    )


async def invalid_query_handler(request: Request, exc: InvalidQueryError) -> JSONResponse:
    return error_response(400, str(exc), exc.code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = ", ".join(str(err["loc"][-1]) for err in exc.errors() if err.get("loc"))
    return error_response(400, f"Invalid query parameters: {fields}", "INVALID_QUERY")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return error_response(500, "Failed to fetch camera data", "FETCH_ERROR")


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(InvalidQueryError, invalid_query_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
