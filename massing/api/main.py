"""
Massing Studio REST API - FastAPI application.

Exposes the pure proxy and sun functions to the browser studio.

Endpoints:
    GET  /                  - API info and health check
    GET  /materials         - Material catalog
    GET  /sun               - Sun direction for a site and time
    GET  /advice            - Solar index and suggested WWR for a facade
    POST /performance       - Proxy summary for a model
    POST /scene             - Renderer scene data for a model
    POST /snapshots         - Save a model snapshot
    GET  /snapshots         - Saved snapshots, most recent first
    GET  /snapshots/{id}    - Restore one snapshot

Usage:
    uvicorn massing.api.main:app --reload --port 8000
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .. import __version__
from ..analysis.performance import PerformanceSummary, compute_performance
from ..analysis.proxies import recommended_wwr, solar_index
from ..analysis.solar import light_position, sun_position
from ..core.config import settings
from ..core.materials import list_materials
from ..core.models import Material, Model
from ..export.snapshots import SnapshotHistory
from ..visualization.scene import build_scene

logger = logging.getLogger(__name__)

# In-memory snapshot history (one per process)
SNAPSHOTS = SnapshotHistory(limit=settings.snapshot_limit)


# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class PerformanceRequest(BaseModel):
    """Model plus optional climate overrides."""
    model: Model
    latitude: Optional[float] = Field(None, ge=-90, le=90, description="Site latitude (deg)")
    hdd: Optional[float] = Field(None, ge=0, description="Heating degree-days")
    cdd: Optional[float] = Field(None, ge=0, description="Cooling degree-days")
    lpd: Optional[float] = Field(None, ge=0, description="Lighting power density (W/m²)")


class SunResponse(BaseModel):
    altitude_deg: float
    azimuth_deg: float
    direction: List[float]
    light_position: List[float]


class AdviceResponse(BaseModel):
    latitude: float
    orientation_deg: float
    solar_index: float
    recommended_wwr: float


class SnapshotRequest(BaseModel):
    name: str = Field("My Model", min_length=1)
    model: Model


class SnapshotInfo(BaseModel):
    id: int
    name: str
    created_at: datetime


# =============================================================================
# FASTAPI APPLICATION
# =============================================================================

app = FastAPI(
    title="Massing Studio API",
    description="Massing proxies: carbon, daylight, energy and sun",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", tags=["General"])
async def root():
    """API info and health check."""
    return {
        "name": "Massing Studio API",
        "version": __version__,
        "status": "healthy",
        "endpoints": {
            "materials": "GET /materials",
            "sun": "GET /sun",
            "advice": "GET /advice",
            "performance": "POST /performance",
            "scene": "POST /scene",
            "snapshots": "GET|POST /snapshots",
        },
        "documentation": "/docs",
    }


@app.get("/materials", response_model=List[Material], tags=["Catalog"])
async def materials():
    """Material catalog."""
    return list_materials()


@app.get("/sun", response_model=SunResponse, tags=["Site"])
async def sun(
    lat: float = Query(settings.latitude, ge=-90, le=90),
    lon: float = Query(settings.longitude, ge=-180, le=180),
    at: Optional[datetime] = Query(None, description="Local date and time"),
):
    """Sun direction for the directional light."""
    position = sun_position(lat, lon, at or datetime.now())
    return SunResponse(
        altitude_deg=position.altitude_deg,
        azimuth_deg=position.azimuth_deg,
        direction=list(position.direction),
        light_position=list(light_position(position.direction)),
    )


@app.get("/advice", response_model=AdviceResponse, tags=["Site"])
async def advice(
    lat: float = Query(settings.latitude, ge=-90, le=90),
    orientation: float = Query(180.0, description="Facade azimuth (0=N, 180=S)"),
):
    """Solar index and suggested window-to-wall ratio."""
    return AdviceResponse(
        latitude=lat,
        orientation_deg=orientation,
        solar_index=solar_index(lat, orientation),
        recommended_wwr=recommended_wwr(lat, orientation),
    )


@app.post("/performance", response_model=PerformanceSummary, tags=["Analysis"])
async def performance(request: PerformanceRequest):
    """Proxy performance summary for a model."""
    return compute_performance(
        request.model,
        latitude=request.latitude,
        hdd=request.hdd,
        cdd=request.cdd,
        lpd=request.lpd,
    )


@app.post("/scene", tags=["Analysis"])
async def scene(model: Model) -> Dict:
    """Scene data for the renderer."""
    return build_scene(model)


@app.post("/snapshots", response_model=SnapshotInfo, tags=["Snapshots"])
async def save_snapshot(request: SnapshotRequest):
    """Save a snapshot; the oldest beyond the limit are dropped."""
    snapshot = SNAPSHOTS.save(request.model, request.name)
    return SnapshotInfo(id=snapshot.id, name=snapshot.name, created_at=snapshot.created_at)


@app.get("/snapshots", response_model=List[SnapshotInfo], tags=["Snapshots"])
async def list_snapshots():
    """Saved snapshots, most recent first."""
    return [
        SnapshotInfo(id=s.id, name=s.name, created_at=s.created_at)
        for s in SNAPSHOTS.snapshots
    ]


@app.get("/snapshots/{snapshot_id}", response_model=Model, tags=["Snapshots"])
async def restore_snapshot(snapshot_id: int):
    """Model stored in a snapshot."""
    try:
        return SNAPSHOTS.restore(snapshot_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Snapshot {snapshot_id} not found")
