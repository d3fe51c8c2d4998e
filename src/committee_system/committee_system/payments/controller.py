from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.model import MeetingContext
from ..common.http import money
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.payment_report_service

    @app.route("/api/report", methods=["GET"], endpoint="attendance_report")
    def attendance_report():
        raw = (request.args.get("context") or "").strip()
        rows = service.build_report(MeetingContext.parse(raw) if raw else None)
        return jsonify({
            "success": True,
            "rows": [
                {
                    "subcommitteeName": r.subcommittee_name,
                    "memberId": r.member_id,
                    "memberName": r.member_name,
                    "meetingsAttended": r.meetings_attended,
                    "amount": money(r.amount),
                    "isConvener": r.is_convener,
                }
                for r in rows
            ],
            "total": money(service.report_total(rows)),
        })
