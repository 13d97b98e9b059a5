"""Shared fixtures for SignAvatar tests."""

import copy
import json
from pathlib import Path

import pytest

from signavatar.models import Catalog
from signavatar.poses.loader import FALLBACK_IDLE_FRAME
from signavatar.render.mock import RecordingRenderer

from helpers import shifted_frame


@pytest.fixture
def catalog_data() -> dict[str, object]:
    return {
        "poses": {
            "idle": {"frames": [copy.deepcopy(FALLBACK_IDLE_FRAME)]},
            "Hello": {"frames": [shifted_frame(20, -20), shifted_frame(40, -20)]},
            "Thanks": {"frames": [shifted_frame(-10, 10)]},
        },
    }


@pytest.fixture
def catalog(catalog_data: dict[str, object]) -> Catalog:
    return Catalog.model_validate(catalog_data)


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_data: dict[str, object]) -> Path:
    path = tmp_path / "poses.json"
    path.write_text(json.dumps(catalog_data), encoding="utf-8")
    return path


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()
