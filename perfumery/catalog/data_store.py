from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Perfume

logger = logging.getLogger(__name__)

_PERFUMES_ADAPTER = TypeAdapter(list[Perfume])

_perfumes: dict[Path, list[Perfume]] = {}


class CatalogSource(Protocol):
    def get_all_with_relations(self) -> list[Perfume]:
        """Return every perfume with its aroma tags and notes populated."""
        ...


class InMemoryCatalog:
    """Catalog backed by an already materialized list of perfumes."""

    def __init__(self, perfumes: list[Perfume]) -> None:
        self._perfumes = list(perfumes)

    def get_all_with_relations(self) -> list[Perfume]:
        return list(self._perfumes)


class FileCatalog:
    """Catalog backed by the JSON snapshot at ``config.catalog_path``."""

    def __init__(self, config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> None:
        self.config = config

    def get_all_with_relations(self) -> list[Perfume]:
        return list(get_catalog(self.config))


def _load(path: Path) -> list[Perfume]:
    perfumes = _PERFUMES_ADAPTER.validate_json(path.read_bytes())
    logger.info("Loaded %d perfumes from %s", len(perfumes), path)
    return perfumes


def get_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[Perfume]:
    """Return the snapshot at ``config.catalog_path``, loading it on first call.

    Snapshots are cached per resolved path, so configs pointing at different
    files never share data.
    """
    path = Path(config.catalog_path).resolve()
    if path not in _perfumes:
        _perfumes[path] = _load(path)
    return _perfumes[path]


def clear_catalog() -> None:
    _perfumes.clear()
