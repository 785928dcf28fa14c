import logging
import time
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": "INTERNAL_ERROR", "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}: {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    error_dict = {"code": "INTERNAL_ERROR", "message": "Internal server error"}
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
    )
    return response


def configure_logging(ApplicationConfig) -> None:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def configure_sentry(ApplicationConfig) -> None:
    if not ApplicationConfig.ENABLE_SENTRY or not ApplicationConfig.DSN_SENTRY:
        return
    sentry_sdk.init(
        dsn=ApplicationConfig.DSN_SENTRY,
        environment=ApplicationConfig.SENTRY_ENVIRONMENT,
        traces_sample_rate=0.1,
        send_default_pii=False,
    )
    logger.info(f"Sentry enabled for environment {ApplicationConfig.SENTRY_ENVIRONMENT}")


def create_app(ApplicationConfig) -> FastAPI:
    configure_logging(ApplicationConfig)
    configure_sentry(ApplicationConfig)

    from renovator.adapter.services.session_sweeper import SessionSweeper
    from renovator.depends import unit_of_work_scope

    sweeper = SessionSweeper(
        unit_of_work_scope, ApplicationConfig.SESSION_SWEEP_INTERVAL_SECONDS
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        sweeper.start()
        yield
        await sweeper.stop()

    app = FastAPI(title="Renovator API", version="0.1.0", lifespan=lifespan)
    app.state.session_sweeper = sweeper

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    from renovator.api.routes import (
        admin,
        auth,
        budgets,
        health_check,
        milestones,
        projects,
        resources,
        sessions,
        suppliers,
        tasks,
        work_item_templates,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(sessions.router, prefix=prefix, tags=["Sessions"])
    app.include_router(projects.router, prefix=prefix, tags=["Projects"])
    app.include_router(milestones.router, prefix=prefix, tags=["Milestones"])
    app.include_router(tasks.router, prefix=prefix, tags=["Tasks"])
    app.include_router(work_item_templates.router, prefix=prefix, tags=["Work Item Templates"])
    app.include_router(budgets.router, prefix=prefix, tags=["Budgets"])
    app.include_router(resources.router, prefix=prefix, tags=["Resources"])
    app.include_router(suppliers.router, prefix=prefix, tags=["Suppliers"])
    app.include_router(admin.router, prefix=prefix, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
