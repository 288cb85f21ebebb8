from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional
import time
import uuid

from fastapi import APIRouter, Depends, FastAPI, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from specialist_search.core.config import settings
from specialist_search.core.logger import service_logger
from specialist_search.schemas.specialists import SpecialistFilterOptions, SpecialistOut
from specialist_search.services.health_check import ReadinessResponse, run_readiness_check
from specialist_search.services.meta_service import get_filter_options
from specialist_search.services.search_engine import search_specialists
from specialist_search.services.specialist_store import (
    SpecialistStore,
    StoreUnavailableError,
    build_seeded_store,
)


def get_store(request: Request) -> SpecialistStore:
    store = getattr(request.app.state, "specialist_store", None)
    if store is None:
        raise StoreUnavailableError("Specialist store has not been provisioned")
    return store


router = APIRouter(prefix=settings.API_PREFIX, tags=["specialists"])


@router.get("/search", response_model=List[SpecialistOut])
def search(
    specialty: Optional[str] = Query(None, description="Exact specialty (e.g. Legal)"),
    text: Optional[str] = Query(None, description="Text matched in name or city"),
    store: SpecialistStore = Depends(get_store),
) -> List[SpecialistOut]:
    """
    Example URLs:
    - /api/specialists/search
    - /api/specialists/search?specialty=Legal
    - /api/specialists/search?text=york
    - /api/specialists/search?specialty=Accounting&text=Chicago
    """
    return search_specialists(store, specialty=specialty, text=text)


@router.get("/meta/filters", response_model=SpecialistFilterOptions)
def meta_filters(store: SpecialistStore = Depends(get_store)) -> SpecialistFilterOptions:
    """Returns the filter options (specialties, cities) present in the store."""
    return get_filter_options(store)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # An injected store takes precedence over the seeded one.
    if getattr(app.state, "specialist_store", None) is None:
        app.state.specialist_store = build_seeded_store()
    service_logger.log_event(
        "API is ready",
        extra={"url": f"http://localhost:{settings.PORT}{settings.API_PREFIX}/search"},
    )
    yield


def create_app(store: SpecialistStore | None = None) -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, lifespan=lifespan)
    app.state.specialist_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.perf_counter()
        request_id = str(uuid.uuid4())
        # Attach request ID to state for logging
        request.state.request_id = request_id

        response: Response = await call_next(request)

        process_time = time.perf_counter() - start_time
        service_logger.log_request(
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=process_time * 1000,
            request_id=request_id,
        )
        response.headers["X-Process-Time"] = str(process_time)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
        service_logger.log_error(
            "Specialist store unavailable",
            error=exc,
            request_id=getattr(request.state, "request_id", None),
        )
        return JSONResponse(status_code=503, content={"detail": "Specialist store is unavailable"})

    @app.get("/health", tags=["meta"])
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/health/live", tags=["meta"])
    def health_live() -> dict:
        return {"status": "ok"}

    @app.get("/health/ready", response_model=ReadinessResponse, tags=["meta"])
    def health_ready(request: Request) -> ReadinessResponse:
        return run_readiness_check(getattr(request.app.state, "specialist_store", None))

    app.include_router(router)
    return app


app = create_app()
