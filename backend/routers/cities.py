import logging

from fastapi import APIRouter, Depends, HTTPException

from services.cache_service import TTLCache
from services.catalog_service import get_catalog
from services.geonames_service import (
    CountryNotFoundError,
    ServiceNotConfiguredError,
    UpstreamError,
    get_arabic_cities,
    get_city_cache,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["cities"])


@router.get("/world-countries", response_model=list[str])
async def list_world_countries():
    return [entry.name for entry in get_catalog().world_countries]


@router.get("/cities", response_model=list[str])
async def list_cities(country: str | None = None):
    if not country:
        raise HTTPException(status_code=400, detail="Missing country query param")
    wanted = country.lower()
    match = next((c for c in get_catalog().world_countries if c.name.lower() == wanted), None)
    if match is None:
        raise HTTPException(status_code=404, detail="Country not found")
    return match.cities


@router.get("/cities/ar", response_model=list[str])
async def list_cities_ar(country: str | None = None, cache: TTLCache = Depends(get_city_cache)):
    country = (country or "").strip()
    if not country:
        raise HTTPException(status_code=400, detail="Missing country query param")
    try:
        return await get_arabic_cities(country, cache=cache)
    except CountryNotFoundError:
        raise HTTPException(status_code=404, detail="Country not found in Arabic list")
    except ServiceNotConfiguredError as e:
        logger.error("Arabic city lookup unavailable: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    except UpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception:
        logger.exception("Arabic city lookup failed for %r", country)
        raise HTTPException(status_code=500, detail="failed_to_fetch_cities_ar")
