"""Pose catalog loading and the built-in fallback catalog."""

from signavatar.poses.loader import (
    FALLBACK_IDLE_FRAME,
    CatalogLoadError,
    bundled_catalog_path,
    fallback_catalog,
    fetch_catalog,
    load_catalog,
    parse_catalog,
)

__all__ = [
    "FALLBACK_IDLE_FRAME",
    "CatalogLoadError",
    "bundled_catalog_path",
    "fallback_catalog",
    "fetch_catalog",
    "load_catalog",
    "parse_catalog",
]
