"""FastAPI routers for the village record stores.

Every entity gets the same five CRUD routes from :func:`build_record_router`;
the summary, filter and toggle routes live on :data:`router`.
"""

# Route signatures take their body and response models from factory
# arguments, so annotations here must be evaluated when the route is defined.

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from village.core.types import RecordNotFoundError
from village.records.models import (
    Asset,
    AssetCreate,
    AssetSummary,
    AssetUpdate,
    Budget,
    BudgetCreate,
    BudgetUpdate,
    Event,
    EventCreate,
    EventUpdate,
    FinanceSummary,
    FinanceTransaction,
    FinanceTransactionCreate,
    FinanceTransactionUpdate,
    PublicService,
    PublicServiceCreate,
    PublicServiceUpdate,
    Resident,
    ResidentCreate,
    ResidentUpdate,
)


# ---------------------------------------------------------------------------
# Helper to get repositories from app state
# ---------------------------------------------------------------------------


def _get_repository(request: Request, key: str) -> Any:
    repositories = getattr(request.app.state, "repositories", None) or {}
    repo = repositories.get(key)
    if repo is None:
        raise HTTPException(status_code=503, detail=f"{key} store not available")
    return repo


def _not_found(exc: RecordNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc))


# ---------------------------------------------------------------------------
# Generic CRUD routes
# ---------------------------------------------------------------------------


def build_record_router(
    key: str,
    prefix: str,
    create_model: type[BaseModel],
    update_model: type[BaseModel],
    record_model: type[BaseModel],
) -> APIRouter:
    """Create the create/list/get/update/delete routes for one entity."""
    router = APIRouter(prefix=prefix, tags=[key])

    @router.post("", response_model=record_model)
    async def create_record(body: create_model, request: Request) -> Any:
        repo = _get_repository(request, key)
        return await repo.create(body)

    @router.get("", response_model=list[record_model])
    async def list_records(request: Request) -> Any:
        repo = _get_repository(request, key)
        return await repo.list_all()

    @router.get("/{record_id:int}", response_model=record_model)
    async def get_record(record_id: int, request: Request) -> Any:
        repo = _get_repository(request, key)
        record = await repo.get(record_id)
        if record is None:
            raise HTTPException(status_code=404, detail=f"{key} {record_id} not found")
        return record

    @router.patch("/{record_id:int}", response_model=record_model)
    async def update_record(record_id: int, body: update_model, request: Request) -> Any:
        repo = _get_repository(request, key)
        try:
            return await repo.update(record_id, body)
        except RecordNotFoundError as exc:
            raise _not_found(exc) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @router.delete("/{record_id:int}")
    async def delete_record(record_id: int, request: Request) -> dict[str, bool]:
        repo = _get_repository(request, key)
        return {"success": await repo.delete(record_id)}

    return router


RECORD_ROUTERS: tuple[APIRouter, ...] = (
    build_record_router("residents", "/api/residents", ResidentCreate, ResidentUpdate, Resident),
    build_record_router(
        "finance",
        "/api/finance",
        FinanceTransactionCreate,
        FinanceTransactionUpdate,
        FinanceTransaction,
    ),
    build_record_router("budgets", "/api/budgets", BudgetCreate, BudgetUpdate, Budget),
    build_record_router("events", "/api/events", EventCreate, EventUpdate, Event),
    build_record_router("assets", "/api/assets", AssetCreate, AssetUpdate, Asset),
    build_record_router(
        "services",
        "/api/services",
        PublicServiceCreate,
        PublicServiceUpdate,
        PublicService,
    ),
)


# ---------------------------------------------------------------------------
# Summaries, filters and lifecycle helpers
# ---------------------------------------------------------------------------


router = APIRouter()


@router.get("/api/finance/summary", response_model=FinanceSummary)
async def api_finance_summary(request: Request) -> FinanceSummary:
    """Total income, total expense and balance."""
    return await _get_repository(request, "finance").summary()


@router.get("/api/budgets/year/{year}", response_model=list[Budget])
async def api_budgets_by_year(year: int, request: Request) -> list[Budget]:
    return await _get_repository(request, "budgets").by_year(year)


@router.get("/api/events/upcoming", response_model=list[Event])
async def api_upcoming_events(request: Request) -> list[Event]:
    """Events with status planned or ongoing."""
    return await _get_repository(request, "events").upcoming()


@router.get("/api/assets/category/{category}", response_model=list[Asset])
async def api_assets_by_category(category: str, request: Request) -> list[Asset]:
    return await _get_repository(request, "assets").by_category(category)


@router.get("/api/assets/summary", response_model=AssetSummary)
async def api_assets_summary(request: Request) -> AssetSummary:
    """Total value, count and per-condition counts of all assets."""
    return await _get_repository(request, "assets").summary()


@router.get("/api/services/active", response_model=list[PublicService])
async def api_active_services(request: Request) -> list[PublicService]:
    return await _get_repository(request, "services").list_active()


@router.post("/api/services/{record_id:int}/toggle", response_model=PublicService)
async def api_toggle_service(record_id: int, request: Request) -> PublicService:
    """Flip a public service between active and inactive."""
    repo = _get_repository(request, "services")
    try:
        return await repo.toggle_active(record_id)
    except RecordNotFoundError as exc:
        raise _not_found(exc) from exc
