from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_CATALOG = Path(__file__).resolve().parent.parent / "data" / "catalog.json"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the catalog snapshot lives and how browse queries are paged.
    """

    catalog_path: Path = Path(os.getenv("PERFUMERY_CATALOG_PATH", str(_DEFAULT_CATALOG)))
    page_size: int = 12
    max_page_size: int = 100


DEFAULT_CATALOG_CONFIG = CatalogConfig()
