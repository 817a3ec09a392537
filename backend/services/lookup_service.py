from typing import Iterable, Literal

from pydantic import BaseModel

from models.catalog import Catalog, SpecializationList
from utils.text import Language, get_normalizer


class ListLookup(BaseModel):
    """One filterable list endpoint: which table, which side of it, how to match."""

    path: str
    table: str
    select: Literal["items", "keys", "values"] = "items"
    language: Language = "en"
    dedup: bool = False

    def source(self, catalog: Catalog) -> list[str]:
        data = getattr(catalog, self.table)
        if isinstance(data, SpecializationList):
            data = data.specializations
        if self.select == "keys":
            return list(data.keys())
        if self.select == "values":
            return list(data.values())
        return list(data)


def filter_items(
    items: Iterable[str],
    query: str | None,
    language: Language,
    cap: int,
    dedup: bool = False,
) -> list[str]:
    """Return items containing query (order kept), optionally deduplicated, capped."""
    normalize = get_normalizer(language)
    needle = normalize(query)
    results: list[str] = []
    seen: set[str] = set()
    for item in items:
        if len(results) >= cap:
            break
        if needle and needle not in normalize(item):
            continue
        if dedup:
            if item in seen:
                continue
            seen.add(item)
        results.append(item)
    return results
