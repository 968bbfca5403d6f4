from __future__ import annotations

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .errors import PerfumeNotFoundError
from .models import AromaTag, Perfume, PerfumePage


def get_perfume(perfumes: list[Perfume], perfume_id: int) -> Perfume:
    for perfume in perfumes:
        if perfume.id == perfume_id:
            return perfume
    raise PerfumeNotFoundError(perfume_id)


def search_perfumes(
    perfumes: list[Perfume],
    page: int = 1,
    limit: int | None = None,
    search: str = "",
    brand: str = "",
    aroma: str = "",
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> PerfumePage:
    """Filter the catalog and return one page of matches.

    ``search`` matches name or description (case-insensitive substring),
    ``brand`` must match exactly and ``aroma`` is an aroma-tag slug.
    """
    page = max(page, 1)
    limit = limit if limit and limit > 0 else config.page_size
    limit = min(limit, config.max_page_size)

    needle = search.strip().lower()
    matches = [
        p
        for p in perfumes
        if (not needle or needle in p.name.lower() or needle in p.description.lower())
        and (not brand or p.brand == brand)
        and (not aroma or aroma in p.aroma_slugs)
    ]

    offset = (page - 1) * limit
    return PerfumePage(
        items=matches[offset:offset + limit],
        total=len(matches),
        page=page,
        limit=limit,
    )


def list_aromas(perfumes: list[Perfume]) -> list[AromaTag]:
    """Distinct aroma tags across the catalog, keyed by slug, sorted by name."""
    by_slug: dict[str, AromaTag] = {}
    for perfume in perfumes:
        for tag in perfume.aroma_tags:
            by_slug.setdefault(tag.slug, tag)
    return sorted(by_slug.values(), key=lambda t: (t.name.lower(), t.slug))


def get_aromas_by_slugs(perfumes: list[Perfume], slugs: list[str]) -> list[AromaTag]:
    wanted = set(slugs)
    return [tag for tag in list_aromas(perfumes) if tag.slug in wanted]


def list_brands(perfumes: list[Perfume]) -> list[str]:
    return sorted({p.brand for p in perfumes if p.brand})
