"""
FastAPI Backend Server for pointer motion synthesis and analysis

Serves trajectory generation for automation drivers and kinetics series for
the analysis charts, on top of the automouse package.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from automouse import Kinetics, NonConvergence, normalize_recording, simulate
from automouse.simulators import SIMULATORS
from automouse.spline import KnotStrategy

logger = logging.getLogger(__name__)

app = FastAPI(title="Automouse API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class PointModel(BaseModel):
    x: float
    y: float


class SimulateRequest(BaseModel):
    simulator: str
    source: PointModel
    dest: PointModel
    config: Dict[str, Any] = {}
    seed: Optional[int] = None


class SimulateResponse(BaseModel):
    success: bool
    trajectory: Optional[List[List[float]]] = None
    total_duration: Optional[float] = None
    error: Optional[str] = None


class KineticsRequest(BaseModel):
    samples: List[List[float]]
    interval: float = 10.0
    strategy: KnotStrategy = KnotStrategy.LOCAL
    normalize: bool = False


class KineticsResponse(BaseModel):
    success: bool
    parameters: Optional[List[Dict[str, Any]]] = None
    error: Optional[str] = None


@app.get("/")
async def root():
    return {
        "message": "Automouse API",
        "version": "0.1.0",
        "simulators": sorted(SIMULATORS),
        "endpoints": {
            "POST /api/simulate": "Generate a pointer trajectory between two points",
            "POST /api/kinetics": "Sample velocity/acceleration/jerk of a recorded motion",
        }
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}


@app.post("/api/simulate", response_model=SimulateResponse)
async def simulate_trajectory(request: SimulateRequest):
    """
    Generate a trajectory and return it as ``[x, y, timestamp]`` rows
    (timestamps in ms since the start of the motion).
    """
    if request.simulator not in SIMULATORS:
        raise HTTPException(status_code=400, detail=f"Unknown simulator: {request.simulator}")
    try:
        trajectory = simulate(
            request.simulator,
            request.source.model_dump(),
            request.dest.model_dump(),
            request.config,
            rng=request.seed,
        )
        rows = [[float(p.x), float(p.y), float(p.timestamp)] for p in trajectory]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid input: {str(e)}")
    except (NonConvergence, ArithmeticError) as e:
        raise HTTPException(status_code=422, detail=f"Simulator error: {str(e)}")

    logger.info("%s: %d points", request.simulator, len(rows))
    return SimulateResponse(
        success=True,
        trajectory=rows,
        total_duration=rows[-1][2] if rows else 0.0
    )


@app.post("/api/kinetics", response_model=KineticsResponse)
async def kinetics_series(request: KineticsRequest):
    """Sample the kinetics of a recording every ``interval`` ms."""
    try:
        samples = normalize_recording(request.samples) if request.normalize else request.samples
        kinetics = Kinetics(samples, request.strategy)
        series = kinetics.series(request.interval)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid input: {str(e)}")

    return KineticsResponse(
        success=True,
        parameters=[{"time": t, **params.to_dict()} for t, params in series]
    )


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
