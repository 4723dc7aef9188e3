from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.router import api_router
from app.core.config import settings
from app.services.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    # Handlers belong to the server; only the level of this package is set here.
    logging.getLogger("app").setLevel(settings.LOG_LEVEL)
    # The store lives exactly as long as the application: empty on startup, discarded on shutdown.
    repository = EmployeeRepository()
    application.state.employee_repository = repository
    logger.info("EmployeeRepository initialized")
    yield
    logger.info("Discarding EmployeeRepository (%d employees)", len(repository))
    repository.clear()
    del application.state.employee_repository


app = FastAPI(
    title=settings.APP_NAME,
    description="Employee records: list, fetch, create and update",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": settings.APP_NAME}
