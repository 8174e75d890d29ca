from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..attendance.classifier import parse_start_time
from ..common.validators import optional_text, require_max_length, require_non_empty
from ..core.constants import DEFAULT_SCHOOL_NAME, DEFAULT_START_TIME, MAX_START_TIME_LENGTH
from .model import SchoolDetails
from .repository import SchoolRepository

logger = logging.getLogger(__name__)


class SchoolConfigService:
    """Holds the school profile and the start time the classifier reads."""

    def __init__(self, school: SchoolRepository, *, default_start_time: str = DEFAULT_START_TIME):
        self._school = school
        self._default_start_time = default_start_time

    def get_details(self) -> SchoolDetails:
        return self._school.get() or SchoolDetails(name=DEFAULT_SCHOOL_NAME, start_time=self._default_start_time)

    def update_details(
        self,
        *,
        name: str,
        address: str = "",
        established_year: str = "",
        logo_url: str = "",
        start_time: Optional[str] = None,
    ) -> SchoolDetails:
        details = SchoolDetails(
            name=require_non_empty(name, "School name"),
            address=optional_text(address, "Address"),
            established_year=optional_text(established_year, "Established year"),
            logo_url=optional_text(logo_url, "Logo URL"),
            start_time=_checked_start_time(start_time) or self._default_start_time,
        )
        self._warn_if_malformed(details.start_time)
        self._school.save(details)
        logger.info("Saved school profile %r (start %s)", details.name, details.start_time)
        return details

    def update_start_time(self, start_time: Optional[str]) -> SchoolDetails:
        details = replace(self.get_details(), start_time=_checked_start_time(start_time))
        self._warn_if_malformed(details.start_time)
        self._school.save(details)
        logger.info("School start time set to %r", details.start_time)
        return details

    def start_time(self) -> str:
        """Raw configured start time; the classifier copes with bad values."""
        return self.get_details().start_time

    def effective_start_time(self) -> str:
        configured = self.start_time()
        if parse_start_time(configured) is None:
            logger.warning("Start time %r is malformed, using %s", configured, DEFAULT_START_TIME)
            return DEFAULT_START_TIME
        return configured

    def ensure_defaults(self) -> None:
        if self._school.get() is None:
            self._school.save(self.get_details())

    @staticmethod
    def _warn_if_malformed(start_time: str) -> None:
        if parse_start_time(start_time) is None:
            logger.warning(
                "Start time %r is not HH:MM; scans will be classified against %s",
                start_time,
                DEFAULT_START_TIME,
            )


def _checked_start_time(value: Optional[str]) -> str:
    # Malformed values are kept (the classifier falls back); only the storage width is enforced.
    return require_max_length(optional_text(value, "Start time"), "Start time", MAX_START_TIME_LENGTH)
