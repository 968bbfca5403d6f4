from __future__ import annotations


class CatalogError(Exception):
    pass


class PerfumeNotFoundError(CatalogError, LookupError):
    def __init__(self, perfume_id: int) -> None:
        super().__init__(f"perfume {perfume_id} not found")
        self.perfume_id = perfume_id


class AromaNotFoundError(CatalogError, LookupError):
    def __init__(self, key: int | str) -> None:
        super().__init__(f"aroma {key!r} not found")
        self.key = key


class DuplicateAromaSlugError(CatalogError, ValueError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"aroma with slug '{slug}' already exists")
        self.slug = slug
