from datetime import datetime, timedelta, timezone

import pytest

from core.config import AppSettings
from core.domain.models import Release

NOW = datetime(2024, 6, 10, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def settings():
    return AppSettings(_env_file=None, rustc_resource_suffix="-20240601-1.80.0-nightly-abcdef")


@pytest.fixture
def make_release():
    def _make(name="serde", version="1.0.0", **overrides):
        data = {
            "name": name,
            "version": version,
            "description": f"{name} description",
            "rustdoc_status": True,
            "target_name": name.replace("-", "_"),
            "release_time": NOW - timedelta(days=3),
            "stars": 0,
        }
        data.update(overrides)
        return Release(**data)

    return _make
