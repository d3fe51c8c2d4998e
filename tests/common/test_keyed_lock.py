import threading
import time
from datetime import timedelta

import pytest

from committee_system.attendance.model import MeetingContext
from committee_system.attendance.service import AttendanceService
from committee_system.common.locks import KeyedLock


def test_entries_are_dropped_after_release():
    locks = KeyedLock()
    with locks.hold(("member", 1), ("subcommittee", 2)):
        assert len(locks) == 2
    assert len(locks) == 0


def test_entries_are_dropped_when_body_raises():
    locks = KeyedLock()
    with pytest.raises(RuntimeError):
        with locks.hold("k"):
            raise RuntimeError("boom")
    assert len(locks) == 0


def test_same_key_is_exclusive():
    locks = KeyedLock()
    inside = []
    overlaps = []

    def worker():
        with locks.hold("shared"):
            inside.append(1)
            if len(inside) > 1:
                overlaps.append(1)
            time.sleep(0.01)
            inside.pop()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert overlaps == []
    assert len(locks) == 0


def test_daily_marks_do_not_grow_the_lock_map(container, make_member, fixed_now):
    locks = KeyedLock()
    svc = AttendanceService(
        container.attendance_repo, container.members_repo, container.subcommittees_repo, locks=locks
    )
    m = make_member()

    for day in range(200):
        svc.mark(MeetingContext.general(), m.member_id, now=fixed_now + timedelta(days=day))

    assert svc.meetings_attended(m.member_id, MeetingContext.general()) == 200
    assert len(locks) == 0
