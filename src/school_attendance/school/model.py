from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_START_TIME


@dataclass(frozen=True)
class SchoolDetails:
    """School profile plus the configured start time ("HH:MM", 24h local).

    Saved wholesale: there are no partial updates of the stored record.
    """

    name: str
    address: str = ""
    established_year: str = ""
    logo_url: str = ""
    start_time: str = DEFAULT_START_TIME
