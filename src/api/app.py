"""FastAPI application factory and the single error-to-HTTP translation point."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import admins, auth, drivers, locations, riders, rides, vehicles
from carriage.config import get_config
from carriage.errors import USER_MESSAGES, CarriageError, ErrorCode

logger = logging.getLogger(__name__)


async def _carriage_error(_: Request, exc: CarriageError) -> JSONResponse:
    # 5xx details stay in the logs.
    message = exc.message if exc.status_code < 500 else exc.user_message
    return JSONResponse(status_code=exc.status_code, content={"err": message})


async def _request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = USER_MESSAGES[ErrorCode.INVALID_REQUEST]
    return JSONResponse(status_code=422, content={"err": message})


async def _unhandled_error(_: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", exc_info=exc)
    return JSONResponse(status_code=500, content={"err": USER_MESSAGES[ErrorCode.INTERNAL_ERROR]})


def create_app() -> FastAPI:
    config = get_config()
    logging.basicConfig(level=config.log_level)

    app = FastAPI(title="Carriage API")

    # Allow the web frontend to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CarriageError, _carriage_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(Exception, _unhandled_error)

    app.include_router(auth.router, tags=["auth"])
    app.include_router(admins.router, tags=["admins"])
    app.include_router(drivers.router, tags=["drivers"])
    app.include_router(riders.router, tags=["riders"])
    app.include_router(vehicles.router, tags=["vehicles"])
    app.include_router(locations.router, tags=["locations"])
    app.include_router(rides.router, tags=["rides"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app
