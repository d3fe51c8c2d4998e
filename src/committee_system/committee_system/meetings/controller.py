from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..common.validators import require_int
from ..container import Container
from ..core.constants import DEFAULT_MEETING_LIMIT
from .model import Meeting


def meeting_json(m: Meeting) -> dict:
    return {
        "id": m.meeting_id,
        "title": m.title,
        "date": m.meeting_date.isoformat(),
        "minutes": m.minutes,
        "createdBy": m.created_by,
    }


def register(app: Flask, container: Container) -> None:
    service = container.meeting_service

    @app.route("/api/meetings", methods=["GET"], endpoint="list_meetings")
    def list_meetings():
        limit = require_int(request.args.get("limit", DEFAULT_MEETING_LIMIT), "Limit")
        return jsonify({"success": True, "meetings": [meeting_json(m) for m in service.list_recent(limit=limit)]})

    @app.route("/api/meetings", methods=["POST"], endpoint="create_meeting")
    def create_meeting():
        data = json_body()
        meeting = service.create(
            title=data.get("title", ""),
            meeting_date=data.get("date", ""),
            minutes=data.get("minutes"),
            created_by=data.get("createdBy"),
        )
        return jsonify({"success": True, "meeting": meeting_json(meeting)}), 201

    @app.route("/api/meetings/<int:meeting_id>", methods=["PUT"], endpoint="update_meeting")
    def update_meeting(meeting_id: int):
        meeting = service.update(meeting_id=meeting_id, patch=json_body())
        return jsonify({"success": True, "meeting": meeting_json(meeting)})

    @app.route("/api/meetings/<int:meeting_id>", methods=["DELETE"], endpoint="delete_meeting")
    def delete_meeting(meeting_id: int):
        service.delete(meeting_id)
        return jsonify({"success": True, "message": "Meeting deleted"})
