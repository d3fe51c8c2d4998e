def _register(client, **overrides):
    body = {
        "memberType": "AssemblyMember",
        "name": "Kwame Mensah",
        "electoralArea": "Adum",
        "contact": "0551234567",
        "gender": "Male",
        "isConvener": True,
    }
    body.update(overrides)
    return client.post("/api/members", json=body)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_register_list_search(client):
    resp = _register(client)
    assert resp.status_code == 201
    member = resp.get_json()["member"]
    assert member["memberType"] == "AssemblyMember"
    assert member["isConvener"] is True

    assert len(client.get("/api/members").get_json()["members"]) == 1
    assert client.get("/api/members?memberType=GovernmentAppointee").get_json()["members"] == []
    assert client.get("/api/members/search?query=0551").get_json()["members"][0]["id"] == member["id"]
    assert client.get("/api/members/search?query=").get_json()["members"] == []


def test_error_mapping(client):
    resp = _register(client, contact="123")
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert resp.get_json()["error"] == "validation_error"

    _register(client)
    dup = _register(client)
    assert dup.status_code == 409
    assert dup.get_json()["error"] == "duplicate"

    missing = client.delete("/api/members/AssemblyMember/9999")
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "not_found"

    assert client.post("/api/members", json=[1, 2]).status_code == 400


def test_update_and_delete_member(client):
    member = _register(client).get_json()["member"]
    url = f"/api/members/AssemblyMember/{member['id']}"

    resp = client.put(url, json={"name": "Kwame M."})
    assert resp.status_code == 200
    assert resp.get_json()["member"]["name"] == "Kwame M."

    assert client.delete(url).status_code == 200
    assert client.delete(url).status_code == 404


def test_subcommittee_flow(client, sub_ids):
    member = _register(client).get_json()["member"]
    body = {"subcommitteeName": "Travel", "memberId": member["id"], "memberType": "AssemblyMember"}

    resp = client.post("/api/subcommittees/addmember", json=body)
    assert resp.status_code == 201
    assert resp.get_json()["membership"]["isConvener"] is True

    again = client.post("/api/subcommittees/addmember", json=body)
    assert again.status_code == 409

    client.post("/api/subcommittees/addmember", json={**body, "subcommitteeName": "Revenue"})
    third = client.post("/api/subcommittees/addmember", json={**body, "subcommitteeName": "Transport"})
    assert third.status_code == 409
    assert third.get_json()["error"] == "capacity_exceeded"

    overview = client.get("/api/subcommittees").get_json()["subcommittees"]
    assert [s["name"] for s in overview] == ["Transport", "Revenue", "Travel"]

    listed = client.get("/api/subcommittees/members?subcommitteeName=Travel").get_json()["members"]
    assert [r["memberId"] for r in listed] == [member["id"]]

    conveners = client.get("/api/conveners").get_json()["conveners"]
    assert [(c["subcommitteeName"], c["memberId"]) for c in conveners] == [("Travel", member["id"])]

    resp = client.delete(f"/api/subcommittees/{sub_ids['Travel']}/members/{member['id']}")
    assert resp.status_code == 200


def test_attendance_and_report(client, sub_ids):
    member = _register(client).get_json()["member"]
    client.post(
        "/api/subcommittees/addmember",
        json={"subcommitteeName": "Travel", "memberId": member["id"], "memberType": "AssemblyMember"},
    )
    context = f"subcommittee:{sub_ids['Travel']}"

    resp = client.post("/api/attendance", json={"context": context, "memberId": member["id"], "isConvenerMark": True})
    assert resp.status_code == 201

    dup = client.post("/api/attendance", json={"context": context, "memberId": member["id"]})
    assert dup.status_code == 409
    assert dup.get_json()["error"] == "duplicate_attendance"

    today = client.get(f"/api/attendance/{context}/members/{member['id']}/today").get_json()
    assert today["marked"] is True

    report = client.get(f"/api/report?context={context}").get_json()
    assert report["rows"] == [
        {
            "subcommitteeName": "Travel",
            "memberId": member["id"],
            "memberName": "Kwame Mensah",
            "meetingsAttended": 1,
            "amount": 150.0,
            "isConvener": True,
        }
    ]
    assert report["total"] == 150.0

    assert client.delete(f"/api/attendance/{context}").status_code == 400
    cleared = client.delete(f"/api/attendance/{context}?confirm=true").get_json()
    assert cleared["count"] == 1
    assert client.get("/api/report").get_json()["rows"] == []


def test_bad_context(client):
    resp = client.post("/api/attendance", json={"context": "board", "memberId": 1})
    assert resp.status_code == 400


def test_meetings_api(client):
    resp = client.post("/api/meetings", json={"title": "Budget", "date": "2025-01-15", "minutes": "ok"})
    assert resp.status_code == 201
    meeting = resp.get_json()["meeting"]
    assert meeting["date"] == "2025-01-15"

    updated = client.put(f"/api/meetings/{meeting['id']}", json={"title": "Budget review"}).get_json()
    assert updated["meeting"]["title"] == "Budget review"

    assert [m["id"] for m in client.get("/api/meetings").get_json()["meetings"]] == [meeting["id"]]
    assert client.delete(f"/api/meetings/{meeting['id']}").status_code == 200
    assert client.delete(f"/api/meetings/{meeting['id']}").status_code == 404


def test_stats(client):
    _register(client)
    _register(client, contact="0241234567", memberType="GovernmentAppointee", isConvener=False)

    stats = client.get("/api/stats").get_json()["stats"]
    assert stats["totalMembers"] == 2
    assert stats["totalAssemblyMembers"] == 1
    assert stats["totalGovernmentAppointees"] == 1
    assert stats["totalConveners"] == 0
    assert stats["generalAttendance"] == 0


def test_unknown_route_is_json(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_string_false_flags(client):
    resp = _register(client, isConvener="false")
    assert resp.status_code == 201
    member = resp.get_json()["member"]
    assert member["isConvener"] is False

    resp = client.put(f"/api/members/AssemblyMember/{member['id']}", json={"isConvener": "true"})
    assert resp.get_json()["member"]["isConvener"] is True

    resp = client.post("/api/attendance", json={"context": "general", "memberId": member["id"], "isConvenerMark": "false"})
    assert resp.status_code == 201
    assert resp.get_json()["attendance"]["isConvenerMark"] is False

    bad = _register(client, contact="0249999999", isConvener="maybe")
    assert bad.status_code == 400


def test_fractional_member_id_rejected(client):
    resp = client.post("/api/attendance", json={"context": "general", "memberId": 1.7})
    assert resp.status_code == 400
