"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Load .env from the repository root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from lcc_measure.config import Settings
from lcc_measure.host.memory import ModelBuilding
from lcc_measure.host.runner import MeasureRunner
from lcc_measure.logging_config import configure_logging
from lcc_measure.measure import MEASURE_VERSION
from lcc_measure.models.enums import RunOutcome

if TYPE_CHECKING:
    from lcc_measure.measure import AddCostPerFloorAreaToBuilding

logger = logging.getLogger(__name__)

_SAMPLE_FLOOR_AREA_FT2 = 10_000.0


class ApplyRequest(BaseModel):
    """Body of POST /api/apply: a building and the user's arguments."""

    building: ModelBuilding
    arguments: dict[str, Any] = Field(default_factory=dict)


def create_app(
    *,
    measure: AddCostPerFloorAreaToBuilding | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    measure
        Optional pre-built measure for dependency injection (e.g. tests).
        If not provided, one is created from environment settings on first
        request.
    settings
        Optional settings; read from ``LCC_*`` environment variables when
        omitted.
    """
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="LCC Measure", version=MEASURE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject a measure
    app.state.measure = measure
    app.state.settings = settings

    def _get_measure() -> AddCostPerFloorAreaToBuilding:
        m: AddCostPerFloorAreaToBuilding | None = app.state.measure
        if m is not None:
            return m
        from lcc_measure.api.deps import create_measure

        m = create_measure(app.state.settings)
        app.state.measure = m
        return m

    def _run(building: ModelBuilding, arguments: dict[str, Any]) -> dict[str, Any]:
        runner = MeasureRunner()
        _get_measure().run(building, runner, arguments)
        result = runner.result()
        body = {
            "result": result.model_dump(mode="json"),
            "summary": result.to_summary_dict(),
            "building": building.model_dump(mode="json"),
        }
        if result.outcome == RunOutcome.FAIL:
            logger.warning("Measure run failed: %s", "; ".join(result.errors))
            raise HTTPException(status_code=422, detail=body)
        return body

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": MEASURE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/measure
    # ------------------------------------------------------------------

    @app.get("/api/measure")
    def describe_measure() -> dict[str, Any]:
        return _get_measure().describe()

    # ------------------------------------------------------------------
    # POST /api/apply
    # ------------------------------------------------------------------

    @app.post("/api/apply")
    def apply(request: ApplyRequest) -> dict[str, Any]:
        return _run(request.building, request.arguments)

    # ------------------------------------------------------------------
    # GET /api/sample-run
    # ------------------------------------------------------------------

    @app.get("/api/sample-run")
    def sample_run() -> dict[str, Any]:
        from lcc_measure.models.enums import CostCategory

        sample_building = ModelBuilding.from_floor_area_ft2(
            _SAMPLE_FLOOR_AREA_FT2, name="Sample Office"
        )
        sample_building.create_life_cycle_cost(
            name="Existing Roof Replacement",
            cost=15.0,
            cost_units="CostPerArea",
            category=CostCategory.REPLACEMENT.value,
            repeat_period_years=25,
            years_from_start=10,
        )
        return _run(
            sample_building,
            {
                "remove_costs": True,
                "material_cost_ip": 2.0,
                "demolition_cost_ip": 0.0,
                "years_until_costs_start": 0,
                "demo_cost_initial_const": False,
                "expected_life": 20,
                "om_cost_ip": 0.5,
                "om_frequency": 1,
            },
        )

    return app
