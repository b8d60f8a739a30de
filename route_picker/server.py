"""HTTP API: candidate running routes and footway paths."""

import logging
from functools import lru_cache
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .candidates import DEFAULT_BEARINGS, Router, compute_candidate_routes
from .config import Settings, configure_logging, load_settings
from .errors import CandidateBatchError, InvalidInput, NotFound, UpstreamFailure
from .footpath import FetchElements, find_footpath
from .geo import Point

logger = logging.getLogger(__name__)

app = FastAPI(title="Route Picker API")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def get_router(settings: Settings = Depends(get_settings)) -> Router:
    try:
        return settings.ors_client().route
    except RuntimeError as e:
        raise HTTPException(status_code=503, detail=str(e))


def get_fetch_elements(settings: Settings = Depends(get_settings)) -> FetchElements:
    return settings.overpass_client().fetch_elements


class LatLon(BaseModel):
    lat: float
    lon: float


class RoutesBody(BaseModel):
    lat: float
    lon: float
    distance_km: float = 5.0
    mode: str = "out-and-back"
    bearings: Optional[List[float]] = None


class FootpathBody(BaseModel):
    start: LatLon
    end: LatLon
    margin_km: float = Field(0.5, gt=0)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/routes")
def routes(body: RoutesBody, router: Router = Depends(get_router)):
    """Candidate routes, one per bearing. 400 bad input, 502 if any candidate failed."""
    bearings = DEFAULT_BEARINGS if body.bearings is None else body.bearings
    try:
        result = compute_candidate_routes(
            Point(body.lat, body.lon), body.distance_km, body.mode, router, bearings=bearings
        )
    except InvalidInput as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    except CandidateBatchError as e:
        logger.warning("Route batch failed: %s", e.__cause__)
        return JSONResponse({"error": str(e), "bearing": e.bearing}, status_code=502)

    return {
        "status": f"Computed {len(result)} {body.mode} routes successfully.",
        "routes": [
            {
                "bearing": r.bearing,
                "color": r.color,
                "coordinates": [[p.lat, p.lon] for p in r.coordinates],
            }
            for r in result
        ],
    }


@app.post("/footpath")
def footpath(body: FootpathBody, fetch_elements: FetchElements = Depends(get_fetch_elements)):
    """Shortest footway path between two points. 404 no path, 502 map data unavailable."""
    try:
        path = find_footpath(
            Point(body.start.lat, body.start.lon),
            Point(body.end.lat, body.end.lon),
            fetch_elements,
            margin_km=body.margin_km,
        )
    except NotFound as e:
        return JSONResponse({"error": str(e)}, status_code=404)
    except UpstreamFailure as e:
        return JSONResponse({"error": str(e)}, status_code=502)

    return {
        "nodes": path.nodes,
        "coordinates": [[p.lat, p.lon] for p in path.coordinates],
        "distance_km": path.distance_km,
    }


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
