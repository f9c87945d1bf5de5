"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers tables on SQLModel.metadata
from src.api.error import ClientError, client_error_handler
from src.api.middleware import LoggingMiddleware
from src.api.routes import catalog, invoices, work_lines

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        sentry_sdk.init(dsn=config.DSN_SENTRY, environment=config.SENTRY_ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.CREATE_TABLES_ON_STARTUP:
            from src.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ensured")
        yield

    app = FastAPI(title="Work Line Invoicing", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(ClientError, client_error_handler)

    for router in (catalog.router, work_lines.router, invoices.router):
        app.include_router(router, prefix=config.API_PREFIX)

    return app
