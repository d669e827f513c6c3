"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from wedsnap.api.schemas import (
    EstimateRequest,
    QuickEstimateRequest,
    SettingsUpdateRequest,
)
from wedsnap.data.defaults import (
    DEFAULT_EXPRESS_SURCHARGE_PERCENT,
    DEFAULT_EXTRA_HOUR_RATE,
    DEFAULT_UNIT_PRICES,
    INCLUDED_COVERAGE_HOURS,
    MAX_COVERAGE_HOURS,
    MIN_COVERAGE_HOURS,
)
from wedsnap.engine import ENGINE_VERSION
from wedsnap.exceptions import InvalidSelection
from wedsnap.models.settings import SellerEstimateSettings
from wedsnap.settings_store import SellerSettingsStore, default_seller_settings

if TYPE_CHECKING:
    from wedsnap.engine import EstimateEngine
    from wedsnap.models.estimate import EstimateResult

logger = logging.getLogger(__name__)

_DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000"


def _allowed_origins() -> list[str]:
    raw = os.environ.get("WEDSNAP_ALLOWED_ORIGINS", _DEFAULT_ALLOWED_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _estimate_payload(result: EstimateResult) -> dict[str, Any]:
    return {
        "estimate": result.model_dump(mode="json"),
        "summary": result.to_summary_dict(),
    }


def create_app(
    *,
    engine: EstimateEngine | None = None,
    settings_store: SellerSettingsStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built estimate engine (e.g. with a custom catalog). If
        not provided, one is created via create_default_engine on first use.
    settings_store
        Optional seller settings store for dependency injection in tests.
        Defaults to a fresh in-memory store.
    """
    app = FastAPI(title="WedSnap Estimates", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own
    app.state.engine = engine
    app.state.settings_store = settings_store or SellerSettingsStore()

    def _get_engine() -> EstimateEngine:
        eng: EstimateEngine | None = app.state.engine
        if eng is not None:
            return eng
        from wedsnap.factory import create_default_engine

        eng = create_default_engine()
        app.state.engine = eng
        return eng

    def _get_store() -> SellerSettingsStore:
        return app.state.settings_store

    def _resolve_settings(
        settings: SellerEstimateSettings | None,
        seller_id: str | None,
    ) -> SellerEstimateSettings:
        if settings is not None:
            return settings
        if seller_id:
            # Estimates never create a record; only the settings routes do.
            return _get_store().peek(seller_id) or default_seller_settings()
        return SellerEstimateSettings()

    @app.exception_handler(InvalidSelection)
    async def invalid_selection_handler(
        request: Request, exc: InvalidSelection
    ) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "reason": exc.reason},
        )

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/catalog
    # ------------------------------------------------------------------

    @app.get("/api/catalog")
    def catalog() -> dict[str, Any]:
        eng = _get_engine()
        return {
            "catalog": eng.repository.catalog.model_dump(mode="json"),
            "default_unit_prices": dict(DEFAULT_UNIT_PRICES),
            "express_delivery_surcharge_percent": DEFAULT_EXPRESS_SURCHARGE_PERCENT,
            "extra_hour_rate": DEFAULT_EXTRA_HOUR_RATE,
            "coverage_hours": {
                "min": MIN_COVERAGE_HOURS,
                "max": MAX_COVERAGE_HOURS,
                "included": INCLUDED_COVERAGE_HOURS,
            },
        }

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(body: EstimateRequest) -> dict[str, Any]:
        settings = _resolve_settings(body.settings, body.seller_id)
        result = _get_engine().estimate(body.selection, settings)
        return _estimate_payload(result)

    # ------------------------------------------------------------------
    # POST /api/quick-estimate
    # ------------------------------------------------------------------

    @app.post("/api/quick-estimate")
    def quick_estimate(body: QuickEstimateRequest) -> dict[str, Any]:
        settings = _resolve_settings(body.settings, body.seller_id)
        result = _get_engine().quick_estimate(body.selection, settings)
        return _estimate_payload(result)

    # ------------------------------------------------------------------
    # /api/sellers/{seller_id}/estimate-settings
    # ------------------------------------------------------------------

    @app.get("/api/sellers/{seller_id}/estimate-settings")
    def get_seller_settings(seller_id: str) -> dict[str, Any]:
        settings = _get_store().get(seller_id)
        return {"seller_id": seller_id, "settings": settings.model_dump(mode="json")}

    @app.put("/api/sellers/{seller_id}/estimate-settings")
    def update_seller_settings(
        seller_id: str, body: SettingsUpdateRequest
    ) -> dict[str, Any]:
        settings = _get_store().update(
            seller_id,
            unit_prices=body.unit_prices,
            express_delivery_surcharge_percent=body.express_delivery_surcharge_percent,
            extra_hour_rate=body.extra_hour_rate,
        )
        return {"seller_id": seller_id, "settings": settings.model_dump(mode="json")}

    @app.delete("/api/sellers/{seller_id}/estimate-settings")
    def reset_seller_settings(seller_id: str) -> dict[str, Any]:
        settings = _get_store().reset(seller_id)
        return {"seller_id": seller_id, "settings": settings.model_dump(mode="json")}

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        from wedsnap.models.enums import ServiceType
        from wedsnap.models.selection import EstimateSelection

        sample_selection = EstimateSelection(
            service_type=ServiceType.PHOTOGRAPHY,
            selected_package_id="photo-standard",
            selected_feature_ids=frozenset({"feature-drone"}),
            coverage_hours=8,
            express_delivery_requested=True,
        )
        result = _get_engine().estimate(sample_selection, SellerEstimateSettings())
        payload = _estimate_payload(result)
        payload["selection"] = sample_selection.model_dump(mode="json")
        return payload

    return app
