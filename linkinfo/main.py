from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linkinfo import __version__
from linkinfo.core.config import settings
from linkinfo.exceptions.handlers import register_exception_handlers
from linkinfo.routers.router import router
from linkinfo.services.container import ServiceContainer


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pooled client shared by every request
    async with httpx.AsyncClient(timeout=settings.fetch_timeout) as client:
        app.state.container = ServiceContainer(client=client)
        yield


# Initialize FastAPI application
app = FastAPI(
    title="LinkInfo",
    description="Link metadata extraction API",
    version=__version__,
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include the centralized router
app.include_router(router, prefix="/api/v1")
