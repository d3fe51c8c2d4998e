"""Using the service layer directly, without Flask.

Controllers stay thin; the rules live in the services.
"""

import importlib

from config import get_settings_module

from committee_system.attendance.model import MeetingContext
from committee_system.container import EngineSettings, build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=EngineSettings.from_settings(settings))

    for sub, rows in container.subcommittee_service.overview():
        print(sub.name.value, [r.name for r in rows])

    rows = container.payment_report_service.build_report(MeetingContext.general())
    for row in rows:
        print(row.member_name, row.meetings_attended, row.amount)
    print("total", container.payment_report_service.report_total(rows))


if __name__ == "__main__":
    main()
