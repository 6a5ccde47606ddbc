from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from linkinfo.services.exceptions import FetchError, ServiceError, ValidationError

logger = logging.getLogger(__name__)


async def service_exception_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Handle ServiceError and return consistent error response"""
    if isinstance(exc, ValidationError):
        logger.warning(f"{exc.error_code} - {exc.message}")
    elif isinstance(exc, FetchError):
        logger.error(f"{exc.error_code} - {exc.message}")
    else:
        logger.error(f"{exc.error_code} - {exc.message}", exc_info=True)

    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict()
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions (fallback)"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "code": "INTERNAL_SERVER_ERROR",
            "message": "Something went wrong"
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
