import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from config import settings
from models.catalog import Catalog, CountryRecord, SpecializationList
from utils.text import normalize_arabic

logger = logging.getLogger(__name__)

# catalog field -> bundled file name
TABLE_FILES: dict[str, str] = {
    "skills_en": "skills-en.json",
    "skills_ar": "skills-ar.json",
    "hobbies_en": "hobbies-en.json",
    "hobbies_ar": "hobbies-ar.json",
    "specializations_en": "specializations-en.json",
    "specializations_ar": "specializations-ar.json",
    "job_titles_en": "job-titles-en.json",
    "job_titles_ar": "job-titles-ar.json",
    "languages": "languages.json",
    "majors_bachelor_en": "majors-bachelor-en.json",
    "majors_bachelor_ar": "majors-bachelor-ar.json",
    "majors_masters_en": "majors-masters-en.json",
    "majors_masters_ar": "majors-masters-ar.json",
    "majors_doctors_en": "majors-doctors-en.json",
    "majors_doctors_ar": "majors-doctors-ar.json",
    "countries_en": "countries-universities-en.json",
    "countries_ar": "countries-universities-ar.json",
    "world_countries": "world-countries.json",
    "organizations": "organization-certifications.json",
}

_catalog: Catalog | None = None


class CatalogError(ValueError):
    """A bundled table exists but does not match its schema."""


def load_catalog(data_dir: Path) -> Catalog:
    tables = {}
    for field, filename in TABLE_FILES.items():
        path = data_dir / filename
        if not path.exists():
            logger.warning("Table %s missing at %s, serving it empty", field, path)
            continue
        annotation = Catalog.model_fields[field].annotation
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            tables[field] = TypeAdapter(annotation).validate_python(raw)
        except (json.JSONDecodeError, ValidationError) as e:
            raise CatalogError(f"Invalid table {path.name}: {e}") from e
    logger.info("Loaded %d/%d tables from %s", len(tables), len(TABLE_FILES), data_dir)
    return Catalog(**tables)


def get_catalog() -> Catalog:
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(settings.data_dir)
    return _catalog


def get_country_by_code(countries: list[CountryRecord], code: str) -> CountryRecord | None:
    code = code.upper()
    return next((c for c in countries if c.code.upper() == code), None)


def find_arabic_country(name: str) -> CountryRecord | None:
    """Exact match on Arabic-normalized names, so alef spelling variants resolve."""
    target = normalize_arabic(name)
    return next(
        (c for c in get_catalog().countries_ar if normalize_arabic(c.name) == target),
        None,
    )


def table_sizes(catalog: Catalog) -> dict[str, int]:
    sizes = {}
    for field in TABLE_FILES:
        table = getattr(catalog, field)
        if isinstance(table, SpecializationList):
            table = table.specializations
        sizes[field] = len(table)
    return sizes
