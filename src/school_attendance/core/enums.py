from __future__ import annotations

from enum import Enum


class PersonType(str, Enum):
    """Phân loại người trong danh bạ trường (classification)."""

    STUDENT = "STUDENT"
    TEACHER = "TEACHER"


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh lưu trong sổ điểm danh."""

    PRESENT = "PRESENT"
    LATE = "LATE"


class RejectReason(str, Enum):
    """Why a scan did not produce a new attendance event."""

    UNKNOWN_IDENTIFIER = "UNKNOWN_IDENTIFIER"
    ALREADY_RECORDED = "ALREADY_RECORDED"
