from fastapi import APIRouter, HTTPException

from config import settings
from models.catalog import CountryRecord, CountrySummary
from services.catalog_service import get_catalog, get_country_by_code
from services.lookup_service import filter_items
from utils.text import Language, get_normalizer

router = APIRouter(prefix="/api", tags=["countries"])


def _search_countries(countries: list[CountryRecord], q: str | None, language: Language) -> list[CountrySummary]:
    normalize = get_normalizer(language)
    needle = normalize(q)
    matches = [c for c in countries if not needle or needle in normalize(c.name)]
    return [CountrySummary(code=c.code, name=c.name) for c in matches[:settings.result_cap]]


def _search_universities(countries: list[CountryRecord], country: str | None,
                         q: str | None, language: Language) -> list[str]:
    if not country or not country.strip():
        raise HTTPException(status_code=400, detail="Missing country code")
    record = get_country_by_code(countries, country.strip())
    if record is None or record.data is None:
        raise HTTPException(status_code=404, detail="Country not found")
    return filter_items(record.data.keys(), q, language, settings.result_cap)


@router.get("/countries", response_model=list[CountrySummary])
async def list_countries(q: str | None = None):
    return _search_countries(get_catalog().countries_en, q, "en")


@router.get("/countriesar", response_model=list[CountrySummary])
async def list_countries_ar(q: str | None = None):
    return _search_countries(get_catalog().countries_ar, q, "ar")


@router.get("/universities", response_model=list[str])
async def list_universities(country: str | None = None, q: str | None = None):
    return _search_universities(get_catalog().countries_en, country, q, "en")


@router.get("/universitiesar", response_model=list[str])
async def list_universities_ar(country: str | None = None, q: str | None = None):
    return _search_universities(get_catalog().countries_ar, country, q, "ar")
