"""Load the pose catalog from a URL or JSON file, with a built-in fallback."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import httpx
import jsonschema
from pydantic import ValidationError as PydanticValidationError

from signavatar.models.pose import IDLE_POSE, Catalog
from signavatar.validation import validate_catalog_json

logger = logging.getLogger(__name__)

# Catalog shipped with the package.
_BUNDLED_CATALOG = Path(__file__).resolve().parent / "poses.json"

# Canonical standing skeleton used whenever the real catalog is unavailable.
FALLBACK_IDLE_FRAME: dict[str, dict[str, float]] = {
    "head": {"x": 200, "y": 80},
    "neck": {"x": 200, "y": 110},
    "leftShoulder": {"x": 170, "y": 120},
    "rightShoulder": {"x": 230, "y": 120},
    "leftElbow": {"x": 160, "y": 160},
    "rightElbow": {"x": 240, "y": 160},
    "leftWrist": {"x": 160, "y": 200},
    "rightWrist": {"x": 240, "y": 200},
    "spine": {"x": 200, "y": 180},
    "hip": {"x": 200, "y": 220},
    "leftHip": {"x": 180, "y": 220},
    "rightHip": {"x": 220, "y": 220},
    "leftKnee": {"x": 180, "y": 270},
    "rightKnee": {"x": 220, "y": 270},
    "leftAnkle": {"x": 180, "y": 320},
    "rightAnkle": {"x": 220, "y": 320},
}


class CatalogLoadError(Exception):
    """A pose catalog could not be fetched or parsed.

    Returned as a value by :func:`fetch_catalog` rather than raised, so the
    caller decides whether to install the fallback catalog.
    """

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"could not load pose catalog from {source}: {reason}")
        self.source = source
        self.reason = reason


def bundled_catalog_path() -> Path:
    """Return the path of the ``poses.json`` bundled with the package."""
    return _BUNDLED_CATALOG


def fallback_catalog() -> Catalog:
    """Return a catalog holding only the canonical ``idle`` pose."""
    return Catalog.model_validate({"poses": {IDLE_POSE: {"frames": [FALLBACK_IDLE_FRAME]}}})


def parse_catalog(raw: str | bytes) -> Catalog:
    """Decode, schema-check and validate a pose resource document.

    Raises
    ------
    ValueError
        If the document is not valid JSON or fails model validation.
    jsonschema.ValidationError
        If the document does not match ``poses.schema.json``.
    """
    data = json.loads(raw)
    validate_catalog_json(data)
    return Catalog.model_validate(data)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def _read_source(
    source: str,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None,
) -> bytes:
    if _is_url(source):
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            resp = await client.get(source)
            resp.raise_for_status()
            return resp.content
    return await asyncio.to_thread(Path(source).read_bytes)


async def fetch_catalog(
    source: str | Path,
    *,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Catalog | CatalogLoadError:
    """Fetch the pose catalog once from *source*.

    ``source`` is either an ``http(s)://`` URL or a filesystem path.  Any
    network, I/O, decoding or validation failure is returned as a
    :class:`CatalogLoadError` instead of being raised.
    """
    source = str(source)
    try:
        raw = await _read_source(source, timeout, transport)
    except (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError) as exc:
        return CatalogLoadError(source, f"{type(exc).__name__}: {exc}")

    try:
        catalog = parse_catalog(raw)
    except jsonschema.ValidationError as exc:
        return CatalogLoadError(source, f"schema violation: {exc.message}")
    except PydanticValidationError as exc:
        return CatalogLoadError(source, f"invalid structure: {exc}")
    except ValueError as exc:
        return CatalogLoadError(source, f"invalid JSON: {exc}")

    logger.info("Loaded poses from %s: %s", source, ", ".join(catalog.names()))
    return catalog


async def load_catalog(
    source: str | Path,
    *,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Catalog:
    """Fetch the catalog, substituting :func:`fallback_catalog` on failure."""
    result = await fetch_catalog(source, timeout=timeout, transport=transport)
    if isinstance(result, CatalogLoadError):
        logger.warning("%s; using fallback idle pose", result)
        return fallback_catalog()
    return result
