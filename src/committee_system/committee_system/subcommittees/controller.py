from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..common.validators import require_int
from ..container import Container
from .model import MembershipRow


def row_json(r: MembershipRow) -> dict:
    return {
        "subcommitteeId": r.subcommittee_id,
        "subcommitteeName": r.subcommittee_name.value,
        "memberId": r.member_id,
        "memberType": r.member_type.value,
        "name": r.name,
        "contact": r.contact,
        "isConvener": r.is_convener,
    }


def register(app: Flask, container: Container) -> None:
    service = container.subcommittee_service

    @app.route("/api/subcommittees", methods=["GET"], endpoint="subcommittee_overview")
    def subcommittee_overview():
        return jsonify({
            "success": True,
            "subcommittees": [
                {"id": sub.subcommittee_id, "name": sub.name.value, "members": [row_json(r) for r in rows]}
                for sub, rows in service.overview()
            ],
        })

    @app.route("/api/subcommittees/members", methods=["GET"], endpoint="subcommittee_members")
    def subcommittee_members():
        rows = service.list_by_subcommittee(request.args.get("subcommitteeName", ""))
        return jsonify({"success": True, "members": [row_json(r) for r in rows]})

    @app.route("/api/subcommittees/addmember", methods=["POST"], endpoint="add_subcommittee_member")
    def add_subcommittee_member():
        data = json_body()
        membership = service.add_member(
            subcommittee_name=data.get("subcommitteeName", ""),
            member_id=require_int(data.get("memberId"), "Member id"),
            member_type=data.get("memberType", ""),
        )
        message = "Member added as convener" if membership.is_convener else "Member added"
        return jsonify({
            "success": True,
            "message": message,
            "membership": {
                "id": membership.membership_id,
                "subcommitteeId": membership.subcommittee_id,
                "memberId": membership.member_id,
                "memberType": membership.member_type.value,
                "isConvener": membership.is_convener,
            },
        }), 201

    @app.route(
        "/api/subcommittees/<int:subcommittee_id>/members/<int:member_id>",
        methods=["DELETE"],
        endpoint="remove_subcommittee_member",
    )
    def remove_subcommittee_member(subcommittee_id: int, member_id: int):
        service.remove_member(subcommittee_id=subcommittee_id, member_id=member_id)
        return jsonify({"success": True, "message": "Member removed"})

    @app.route("/api/conveners", methods=["GET"], endpoint="list_conveners")
    def list_conveners():
        return jsonify({"success": True, "conveners": [row_json(r) for r in service.list_conveners()]})
