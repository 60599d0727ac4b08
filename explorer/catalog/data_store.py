from __future__ import annotations

import logging

import pandas as pd
from pydantic import ValidationError

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Attraction, CatalogError, UnknownAttractionError

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: list[str] = [
    "id",
    "name",
    "city",
    "category",
    "description",
    "rating",
    "is_open",
]

_catalog: tuple[Attraction, ...] | None = None
_by_id: dict[str, Attraction] = {}


def _read_frame(config: CatalogConfig) -> pd.DataFrame:
    try:
        df = pd.read_csv(
            config.csv_path,
            dtype={"id": str, "name": str, "city": str, "category": str, "description": str},
            true_values=["true", "True", "1"],
            false_values=["false", "False", "0"],
        )
    except (OSError, pd.errors.ParserError) as exc:
        raise CatalogError(f"Cannot read catalog file {config.csv_path}: {exc}") from exc

    missing = [c for c in CATALOG_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"Catalog file is missing columns: {', '.join(missing)}")

    df = df[CATALOG_COLUMNS].copy()
    df["description"] = df["description"].fillna("")
    df["id"] = df["id"].fillna("").str.strip()
    return df


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> tuple[Attraction, ...]:
    """Read and validate the catalog file. Row order is preserved."""
    df = _read_frame(config)

    duplicated = df.loc[df["id"].duplicated(), "id"].tolist()
    if duplicated:
        raise CatalogError(f"Duplicate attraction ids: {', '.join(sorted(set(duplicated)))}")

    attractions: list[Attraction] = []
    for line_no, record in enumerate(df.to_dict("records"), start=2):
        try:
            attractions.append(Attraction.model_validate(record))
        except ValidationError as exc:
            raise CatalogError(f"Invalid catalog row at line {line_no}: {exc}") from exc

    logger.info("Loaded %d attractions from %s", len(attractions), config.csv_path)
    return tuple(attractions)


def get_catalog() -> tuple[Attraction, ...]:
    """Return the in-memory catalog, loading it on first call."""
    global _catalog, _by_id
    catalog = _catalog
    if catalog is None:
        catalog = load_catalog()
        # Publish the index before the catalog; readers check _catalog first.
        _by_id = {a.id: a for a in catalog}
        _catalog = catalog
    return catalog


def get_attraction(attraction_id: str) -> Attraction:
    get_catalog()
    try:
        return _by_id[attraction_id]
    except KeyError:
        raise UnknownAttractionError(attraction_id) from None


def clear_catalog() -> None:
    """Drop the cached catalog so the next access reloads it."""
    global _catalog, _by_id
    _catalog = None
    _by_id = {}
