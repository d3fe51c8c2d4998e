from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container
from .model import Member


def member_json(m: Member) -> dict:
    return {
        "id": m.member_id,
        "memberType": m.member_type.value,
        "name": m.name,
        "electoralArea": m.electoral_area,
        "contact": m.contact,
        "gender": m.gender.value,
        "isConvener": m.is_convener,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/members", methods=["POST"], endpoint="register_member")
    def register_member():
        data = json_body()
        member = container.member_service.register(
            member_type=data.get("memberType", ""),
            name=data.get("name", ""),
            electoral_area=data.get("electoralArea", ""),
            contact=data.get("contact", ""),
            gender=data.get("gender", ""),
            is_convener=data.get("isConvener", False),
        )
        return jsonify({"success": True, "member": member_json(member)}), 201

    @app.route("/api/members", methods=["GET"], endpoint="list_members")
    def list_members():
        member_type = request.args.get("memberType") or None
        members = container.member_service.list_members(member_type=member_type)
        return jsonify({"success": True, "members": [member_json(m) for m in members]})

    @app.route("/api/members/search", methods=["GET"], endpoint="search_members")
    def search_members():
        members = container.member_service.search(request.args.get("query", ""))
        return jsonify({"success": True, "members": [member_json(m) for m in members]})

    @app.route("/api/members/<member_type>/<int:member_id>", methods=["PUT"], endpoint="update_member")
    def update_member(member_type: str, member_id: int):
        member = container.member_service.update(member_id=member_id, member_type=member_type, patch=json_body())
        return jsonify({"success": True, "member": member_json(member)})

    @app.route("/api/members/<member_type>/<int:member_id>", methods=["DELETE"], endpoint="delete_member")
    def delete_member(member_type: str, member_id: int):
        container.member_service.delete(member_id=member_id, member_type=member_type)
        return jsonify({"success": True, "message": "Member deleted"})
