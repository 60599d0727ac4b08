from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_CSV = Path(__file__).resolve().parent.parent / "data" / "attractions.csv"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Location of the seed attraction catalog.

    ``ATTRACTIONS_CSV`` overrides the file shipped with the package.
    """

    csv_path: Path = Path(os.getenv("ATTRACTIONS_CSV", str(_DEFAULT_CSV)))


DEFAULT_CATALOG_CONFIG = CatalogConfig()
