# hrms/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hrms.exceptions import EmployeeAPIError, ParseError

logger = logging.getLogger(__name__)

def create_error_response(status_code: int, message: str) -> JSONResponse:
    """Render the ``{"error": message}`` envelope used by every failed request"""
    return JSONResponse(status_code=status_code, content={"error": message})

async def employee_api_error_handler(request: Request, exc: EmployeeAPIError) -> JSONResponse:
    return create_error_response(exc.status_code, exc.message)

async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Path parameters are plain strings, so only a request body can fail validation here
    logger.debug("Rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
    return create_error_response(ParseError.status_code, ParseError.message)

async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = create_error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response

def register_error_handlers(app: FastAPI):
    app.add_exception_handler(EmployeeAPIError, employee_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
