"""Arabic city names per country, fetched from GeoNames and cached by ISO2 code."""

import logging

from config import settings
from services.cache_service import TTLCache
from services.catalog_service import find_arabic_country
from utils.http_client import get_client
from utils.text import arabic_sort_key

logger = logging.getLogger(__name__)

_cache = TTLCache(ttl=settings.city_cache_ttl_seconds)


class CountryNotFoundError(LookupError):
    pass


class ServiceNotConfiguredError(RuntimeError):
    pass


class UpstreamError(RuntimeError):
    def __init__(self, status_code: int, reason: str | None = None):
        super().__init__(f"geonames error: {reason or status_code}")
        self.status_code = status_code


def get_city_cache() -> TTLCache:
    return _cache


async def get_arabic_cities(country_name: str, cache: TTLCache | None = None) -> list[str]:
    """Resolve an Arabic country name and return its populated places in Arabic.

    Raises CountryNotFoundError, ServiceNotConfiguredError or UpstreamError.
    Only complete, sorted results are cached.
    """
    if cache is None:
        cache = _cache

    country = find_arabic_country(country_name)
    if country is None or not country.code:
        raise CountryNotFoundError(country_name)

    iso2 = country.code.upper()
    cached = cache.get(iso2)
    if cached is not None:
        return cached

    if not settings.geonames_user:
        raise ServiceNotConfiguredError("GEONAMES_USER is not configured")

    client = get_client()
    response = await client.get(
        f"{settings.geonames_base_url}/searchJSON",
        params={
            "country": iso2,
            "featureClass": "P",  # populated places
            "maxRows": settings.result_cap,
            "lang": "ar",
            "username": settings.geonames_user,
        },
        timeout=settings.http_timeout_seconds,
    )
    if not response.is_success:
        logger.error("GeoNames error %s: %s", response.status_code, response.text)
        raise UpstreamError(response.status_code)

    data = response.json()
    if not isinstance(data, dict):
        data = {}
    # quota and credential failures arrive as 200 with a status object
    status = data.get("status")
    if status:
        reason = status.get("message") if isinstance(status, dict) else str(status)
        logger.error("GeoNames rejected request for %s: %s", iso2, status)
        raise UpstreamError(response.status_code, reason)

    entries = data.get("geonames")
    if not isinstance(entries, list):
        entries = []

    names = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name") or ""
        name = name.strip() if isinstance(name, str) else ""
        if name:
            names.append(name)

    cities = sorted(dict.fromkeys(names), key=arabic_sort_key)
    cache.set(iso2, cities)
    logger.info("Cached %d Arabic city names for %s", len(cities), iso2)
    return cities
