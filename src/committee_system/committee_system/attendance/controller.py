from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..common.validators import require_int
from ..container import Container
from ..core.exceptions import ValidationError
from .model import MeetingContext


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        data = json_body()
        context = MeetingContext.parse(str(data.get("context", "")))
        record = service.mark(
            context,
            require_int(data.get("memberId"), "Member id"),
            is_convener_mark=data.get("isConvenerMark", False),
        )
        return jsonify({
            "success": True,
            "message": "Attendance marked",
            "attendance": {
                "id": record.attendance_id,
                "memberId": record.member_id,
                "context": record.context.key,
                "date": record.attended_on.isoformat(),
                "markedAt": record.marked_at.isoformat(timespec="seconds"),
                "isConvenerMark": record.is_convener_mark,
            },
        }), 201

    @app.route("/api/attendance/<context>/members/<int:member_id>/today", methods=["GET"], endpoint="attendance_today")
    def attendance_today(context: str, member_id: int):
        marked = service.is_marked_today(MeetingContext.parse(context), member_id)
        return jsonify({"success": True, "marked": marked})

    @app.route("/api/attendance/<context>", methods=["DELETE"], endpoint="clear_attendance")
    def clear_attendance(context: str):
        if (request.args.get("confirm") or "").lower() != "true":
            raise ValidationError("Pass confirm=true to delete all attendance records")
        count = service.delete_all(MeetingContext.parse(context))
        return jsonify({"success": True, "count": count})
