from __future__ import annotations

import logging

import pytest

from school_attendance.core.exceptions import ValidationError


def test_defaults_before_setup(container):
    details = container.school_service.get_details()

    assert details.name == "My School"
    assert details.start_time == "08:00"
    assert container.school_repo.get() is None

    container.school_service.ensure_defaults()

    assert container.school_repo.get() == details


def test_update_details_overwrites_whole_record(container):
    container.school_service.update_details(name="Riverdale", address="1 Main St", start_time="07:45")

    details = container.school_service.update_details(name="Riverdale High")

    assert details.name == "Riverdale High"
    assert details.address == ""
    assert details.start_time == "08:00"


def test_update_details_requires_name(container):
    with pytest.raises(ValidationError):
        container.school_service.update_details(name=" ")


def test_update_start_time_keeps_profile(container):
    container.school_service.update_details(name="Riverdale", address="1 Main St")

    details = container.school_service.update_start_time("08:30")

    assert details.address == "1 Main St"
    assert container.school_service.start_time() == "08:30"
    assert container.school_service.effective_start_time() == "08:30"


def test_malformed_start_time_is_stored_but_not_used(container, caplog):
    with caplog.at_level(logging.WARNING):
        container.school_service.update_start_time("25:00")

    assert "not HH:MM" in caplog.text
    assert container.school_service.start_time() == "25:00"
    assert container.school_service.effective_start_time() == "08:00"


def test_start_time_longer_than_column_is_rejected(container):
    container.school_service.update_start_time("07:45")

    with pytest.raises(ValidationError):
        container.school_service.update_start_time("nine o'clock in the morning please, " * 3)
    with pytest.raises(ValidationError):
        container.school_service.update_details(name="Riverdale", start_time="9" * 65)

    assert container.school_service.start_time() == "07:45"


def test_malformed_start_time_within_limit_is_kept(container):
    details = container.school_service.update_start_time("nine o'clock in the morning please")

    assert details.start_time == "nine o'clock in the morning please"
    assert container.school_service.effective_start_time() == "08:00"


def test_non_text_start_time_is_rejected(container):
    with pytest.raises(ValidationError):
        container.school_service.update_start_time(830)
