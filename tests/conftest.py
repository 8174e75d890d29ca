from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import pytest

from school_attendance.container import build_container


@pytest.fixture()
def fixed_now() -> datetime:
    # Monday
    return datetime(2026, 2, 2, 7, 45, 0)


@pytest.fixture()
def settings():
    return SimpleNamespace(
        STORAGE_BACKEND="memory",
        DEFAULT_START_TIME="08:00",
        LATE_GRACE_MINUTES=0,
        REPORT_DAYS=7,
    )


@pytest.fixture()
def container(settings):
    return build_container(settings)


@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from school_attendance.main import create_app

    return create_app()


@pytest.fixture()
def client(app):
    with app.test_client() as c:
        yield c
