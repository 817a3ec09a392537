from fastapi import APIRouter

from config import settings
from services.catalog_service import get_catalog
from services.lookup_service import ListLookup, filter_items

router = APIRouter(prefix="/api", tags=["lists"])

LOOKUPS: list[ListLookup] = [
    ListLookup(path="/skills", table="skills_en"),
    ListLookup(path="/skillsar", table="skills_ar", select="values", language="ar"),
    ListLookup(path="/hobbies", table="hobbies_en"),
    ListLookup(path="/hobbies-ar", table="hobbies_ar", language="ar"),
    ListLookup(path="/specializations", table="specializations_en"),
    ListLookup(path="/specializations/ar", table="specializations_ar", language="ar"),
    ListLookup(path="/jobtitles", table="job_titles_en", select="keys"),
    ListLookup(path="/jobtitlesar", table="job_titles_ar", select="values", language="ar"),
    ListLookup(path="/languages", table="languages", select="keys"),
    ListLookup(path="/languagesar", table="languages", select="values", language="ar"),
    ListLookup(path="/bachelor", table="majors_bachelor_en", dedup=True),
    ListLookup(path="/bachelor/ar", table="majors_bachelor_ar", language="ar", dedup=True),
    ListLookup(path="/masters", table="majors_masters_en", dedup=True),
    ListLookup(path="/masters/ar", table="majors_masters_ar", language="ar", dedup=True),
    ListLookup(path="/doctors", table="majors_doctors_en", dedup=True),
    ListLookup(path="/doctors/ar", table="majors_doctors_ar", language="ar", dedup=True),
]


def _make_endpoint(lookup: ListLookup):
    async def search(q: str | None = None) -> list[str]:
        return filter_items(
            lookup.source(get_catalog()),
            q,
            lookup.language,
            settings.result_cap,
            dedup=lookup.dedup,
        )

    search.__name__ = "search_" + lookup.path.strip("/").replace("/", "_").replace("-", "_")
    return search


for _lookup in LOOKUPS:
    router.add_api_route(_lookup.path, _make_endpoint(_lookup), methods=["GET"], response_model=list[str])
