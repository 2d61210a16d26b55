"""
Workasana - task and project management API.
"""
import logging
import time
from typing import Any, Dict, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .core.config import Settings, get_settings
from .core.database import Database
from .core.exceptions import InternalError, ServiceError
from .routers import auth, reports, tasks
from .routers.entities import projects_router, tags_router, teams_router, users_router
from .utils.security import TokenService

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
QUIET_PATHS = {"/health"}


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Translate domain and framework errors into JSON error bodies."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
            headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details = [
            {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request", "details": details}
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Database error" if not debug else str(exc)}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": InternalError.default_message if not debug else str(exc)}
        )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    Raises:
        ConfigurationError: JWT secret or database URL missing
    """
    settings = settings or get_settings()
    settings.validate()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Workasana",
        description="Task and project management API with JWT authentication",
        version=settings.service_version
    )
    app.state.settings = settings
    app.state.database = database or Database(settings.database_url, echo=settings.debug)
    app.state.token_service = TokenService(
        settings.jwt_secret,
        algorithm=settings.algorithm,
        expire_minutes=settings.access_token_expire_minutes
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        """Log all requests with timing"""
        start_time = time.time()
        quiet = request.url.path in QUIET_PATHS

        if not quiet:
            logger.info(f"📨 {request.method} {request.url.path}")

        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        if not quiet:
            logger.info(f"📤 {request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)")

        return response

    register_exception_handlers(app, debug=settings.debug)

    app.include_router(auth.router)
    app.include_router(users_router)
    app.include_router(tasks.router)
    app.include_router(teams_router)
    app.include_router(projects_router)
    app.include_router(tags_router)
    app.include_router(reports.router)

    @app.on_event("startup")
    async def startup_event():
        """Initialize application on startup"""
        logger.info(f"Starting {settings.service_name}...")
        if app.state.database.init_db():
            logger.info("Database initialized successfully")
        else:
            logger.error("Database initialization failed")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Cleanup on shutdown"""
        logger.info(f"Shutting down {settings.service_name}...")
        app.state.database.dispose()

    @app.get("/", tags=["service"])
    async def root() -> Dict[str, Any]:
        """Root endpoint"""
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "status": "running"
        }

    @app.get("/health", tags=["service"])
    def health_check() -> Dict[str, Any]:
        """Health check endpoint"""
        db_healthy = app.state.database.check_connection()
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "status": "healthy" if db_healthy else "unhealthy",
            "database": "connected" if db_healthy else "disconnected",
            "timestamp": time.time()
        }

    return app


def main():
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "workasana.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
