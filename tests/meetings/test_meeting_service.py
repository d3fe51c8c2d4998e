from datetime import date

import pytest

from committee_system.core.exceptions import NotFoundError, ValidationError


def test_create_and_list_recent_first(container):
    svc = container.meeting_service
    svc.create(title="Budget hearing", meeting_date="2025-01-15", minutes="Passed.", created_by="clerk")
    svc.create(title="Road works", meeting_date="2025-02-01T10:00:00")

    meetings = svc.list_recent()
    assert [m.title for m in meetings] == ["Road works", "Budget hearing"]
    assert meetings[0].meeting_date == date(2025, 2, 1)
    assert meetings[0].minutes is None
    assert meetings[1].created_by == "clerk"


@pytest.mark.parametrize("title,when", [("", "2025-01-01"), ("Ok", "01/02/2025"), ("Ok", "")])
def test_create_validation(container, title, when):
    with pytest.raises(ValidationError):
        container.meeting_service.create(title=title, meeting_date=when)


def test_update_and_delete(container):
    svc = container.meeting_service
    m = svc.create(title="Draft", meeting_date=date(2025, 1, 1))

    updated = svc.update(meeting_id=m.meeting_id, patch={"title": "Final", "date": "2025-01-02"})
    assert updated.title == "Final"
    assert updated.meeting_date == date(2025, 1, 2)

    with pytest.raises(ValidationError):
        svc.update(meeting_id=m.meeting_id, patch={})

    svc.delete(m.meeting_id)
    with pytest.raises(NotFoundError):
        svc.get(m.meeting_id)
    with pytest.raises(NotFoundError):
        svc.delete(m.meeting_id)
    with pytest.raises(NotFoundError):
        svc.update(meeting_id=m.meeting_id, patch={"title": "Again"})
