import time
from fastapi import APIRouter

from services.catalog_service import get_catalog, table_sizes
from services.geonames_service import get_city_cache

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check():
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "1.0.0",
        "tables": table_sizes(get_catalog()),
        "cached_countries": len(get_city_cache()),
    }
