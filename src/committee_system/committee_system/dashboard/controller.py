from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..container import Container

_WIRE_NAMES = {
    "total_assembly_members": "totalAssemblyMembers",
    "total_government_appointees": "totalGovernmentAppointees",
    "total_members": "totalMembers",
    "total_conveners": "totalConveners",
    "general_attendance": "generalAttendance",
    "convener_attendance": "execoAttendance",
    "subcommittee_attendance": "subcommitteeAttendance",
}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        summary = asdict(container.dashboard_service.summary())
        return jsonify({"success": True, "stats": {_WIRE_NAMES[k]: v for k, v in summary.items()}})

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})
