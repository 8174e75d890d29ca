from datetime import datetime

from school_attendance.attendance.factory import AttendanceStrategyFactory
from school_attendance.attendance.strategies.late_strategy import LateStrategy
from school_attendance.attendance.strategies.on_time_strategy import OnTimeStrategy
from school_attendance.common.datetime_utils import epoch_millis
from school_attendance.core.enums import AttendanceStatus


def ms(*args) -> int:
    return epoch_millis(datetime(*args))


def test_factory_checkin_on_time_at_cutoff():
    cutoff = ms(2025, 1, 1, 8, 0)

    strategy = AttendanceStrategyFactory().for_checkin(now_ms=cutoff, cutoff_ms=cutoff)

    assert isinstance(strategy, OnTimeStrategy)


def test_factory_checkin_late_after_cutoff():
    cutoff = ms(2025, 1, 1, 8, 0)

    strategy = AttendanceStrategyFactory().for_checkin(now_ms=cutoff + 1, cutoff_ms=cutoff)

    assert isinstance(strategy, LateStrategy)


def test_late_strategy_notes_minutes_late():
    cutoff = ms(2025, 1, 1, 8, 0)

    decision = LateStrategy().decide_checkin(now_ms=ms(2025, 1, 1, 8, 12, 30), cutoff_ms=cutoff)

    assert decision.status == AttendanceStatus.LATE
    assert decision.note == "Late by 12 min"


def test_late_strategy_rounds_sub_minute_up_to_one():
    cutoff = ms(2025, 1, 1, 8, 0)

    decision = LateStrategy().decide_checkin(now_ms=cutoff + 1, cutoff_ms=cutoff)

    assert decision.note == "Late by 1 min"
