import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pothub.api import router
from pothub.core import ConflictError, Database, Settings, StorageUnavailableError, ValidationError, settings
from pothub.models import AuditLog, Device, Pot, Sensor  # noqa: F401
from pothub.services import ResourceService
from pothub.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def _summarize_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    return [
        {"loc": ".".join(str(part) for part in error.get("loc", ())), "msg": str(error.get("msg", ""))}
        for error in exc.errors()
    ]


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc), "errors": exc.errors})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = _summarize_errors(exc)
        logger.warning("Malformed request %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(status_code=400, content={"detail": "Malformed request", "errors": errors})

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
        logger.warning("Conflict on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(StorageUnavailableError)
    async def handle_storage_unavailable(request: Request, exc: StorageUnavailableError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": str(exc)})


def create_app(database: Database | None = None, app_settings: Settings = settings) -> FastAPI:
    setup_logging(app_settings)
    database = database or Database(app_settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # An unreachable database is fatal: the server never starts serving.
        database.ping()
        database.create_all()
        logger.info("Connected to database %s", database.engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            logger.info("Shutting down, releasing database connections")
            database.dispose()

    app = FastAPI(
        title="PotHub API",
        version="0.1.0",
        description="Pots, the sensors mounted in them and the devices they host.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.database = database
    app.state.service = ResourceService.from_database(database)

    _register_error_handlers(app)
    app.include_router(router, prefix="/api")

    @app.get("/")
    def root() -> dict[str, str]:
        return {"message": "PotHub backend is running", "docs": "/docs"}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("pothub.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
