from datetime import datetime, timedelta, timezone

import pytest

from committee_system.attendance.model import MeetingContext
from committee_system.common.datetime_utils import make_clock, now_local
from committee_system.core.exceptions import DuplicateAttendanceError


def _utc(*args):
    return lambda: datetime(*args, tzinfo=timezone.utc)


def test_no_timezone_uses_server_local_time():
    assert make_clock("") is now_local
    assert make_clock(None) is now_local


def test_zone_ahead_of_utc_is_already_tomorrow():
    clock = make_clock("Pacific/Auckland", utc_now=_utc(2025, 3, 10, 23, 30))
    now = clock()
    assert now.tzinfo is None
    assert now == datetime(2025, 3, 11, 12, 30)


def test_zone_behind_utc_is_still_yesterday():
    clock = make_clock("America/New_York", utc_now=_utc(2025, 3, 11, 2, 0))
    assert clock().date() == datetime(2025, 3, 10).date()


def test_unknown_timezone_fails_when_built():
    with pytest.raises(ValueError):
        make_clock("Mars/Olympus_Mons")


def test_day_boundary_between_2359_and_0001(container, make_member):
    m = make_member()
    svc = container.attendance_service
    general = MeetingContext.general()
    late = datetime(2025, 3, 10, 23, 59)

    svc.mark(general, m.member_id, now=late)
    svc.mark(general, m.member_id, now=late + timedelta(minutes=2))
    with pytest.raises(DuplicateAttendanceError):
        svc.mark(general, m.member_id, now=late + timedelta(minutes=3))

    assert svc.meetings_attended(m.member_id, general) == 2
