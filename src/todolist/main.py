import logging
from contextlib import asynccontextmanager
from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .settings import get_settings
from .store import ListStore, get_list_store
from .routers import items as items_router
from .utils import configure_logging

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "list",
        "description": "Add, toggle, remove and clear items of the persisted todo list.",
    },
]

_settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Build the process-wide list store once and restore persisted items into it.

    A malformed stored list aborts startup.
    """
    configure_logging(_settings.log_level)
    factory = app.dependency_overrides.get(get_list_store, get_list_store)
    store = factory()
    store.load()
    logger.info("List store ready with %d item(s)", len(store.list))
    yield


app = FastAPI(
    title="Todo List",
    description="A single persisted todo list backed by pluggable key-value storage.",
    version="0.1.0",
    openapi_tags=openapi_tags,
    lifespan=lifespan,
)


def _cors_origins(origins: List[str]) -> List[str]:
    """An empty origin list means the same as '*'."""
    return origins if origins and origins != ["*"] else ["*"]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(_settings.cors_allow_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Answer 422 with {"error": "ValidationError", "message": ..., "detail": [...]}
    where detail is the encoded pydantic error list.
    """
    body = {
        "error": "ValidationError",
        "message": "Request validation failed",
        "detail": jsonable_encoder(exc.errors()),
    }
    return JSONResponse(status_code=422, content=body)


# PUBLIC_INTERFACE
@app.get("/", summary="Health Check", tags=["health"])
def health_check(store: ListStore = Depends(get_list_store)):
    """
    Report the storage backend, the key the list lives under and the
    current item count.
    """
    return {
        "message": "Healthy",
        "backend": _settings.persistence_backend,
        "storage_key": store.key,
        "items": len(store.list),
    }


# Include routers
app.include_router(items_router.router)
