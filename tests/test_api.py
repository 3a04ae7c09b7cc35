"""HTTP API integration tests."""

import pytest


def _signup(client, username, role="member"):
    r = client.post("/api/users", json={
        "username": username,
        "password": "test1234",
        "name": username.title(),
        "role": role,
    })
    assert r.status_code == 201, r.text
    return r.json()["id"]


def _family(client, name, created_by):
    r = client.post("/api/families", json={"name": name, "created_by": created_by})
    assert r.status_code == 201, r.text
    return r.json()["id"]


def _join(client, family_id, user_id):
    return client.post("/api/family-members", json={"family_id": family_id, "user_id": user_id})


def _goal(client, user_id, target, current=0, **extra):
    r = client.post("/api/goals", json={
        "name": "Daily steps",
        "type": "daily",
        "target_value": target,
        "current_value": current,
        "unit": "steps",
        "user_id": user_id,
        **extra,
    })
    assert r.status_code == 201, r.text
    return r.json()


# --- System & users ---

def test_ping(client):
    r = client.get("/api/system/ping")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_signup_hides_password(client):
    r = client.post("/api/users", json={"username": "mom", "password": "pw", "name": "Mom", "role": "admin"})

    assert r.status_code == 201
    data = r.json()
    assert data["username"] == "mom"
    assert data["role"] == "admin"
    assert "password" not in data and "password_hash" not in data


def test_duplicate_username_conflicts(client):
    _signup(client, "dad")
    r = client.post("/api/users", json={"username": "dad", "password": "x", "name": "Dad 2"})

    assert r.status_code == 409
    assert r.json()["detail"]["error"] == "duplicate"


def test_signup_rejects_unknown_role(client):
    r = client.post("/api/users", json={"username": "x", "password": "x", "name": "X", "role": "owner"})
    assert r.status_code == 422


def test_signup_rejects_password_longer_than_bcrypt_accepts(client):
    # 40 characters, 80 bytes in UTF-8
    r = client.post("/api/users", json={"username": "x", "password": "\u00e9" * 40, "name": "X"})
    assert r.status_code == 422

    r = client.post("/api/users", json={"username": "y", "password": "a" * 72, "name": "Y"})
    assert r.status_code == 201


def test_user_lookup(client):
    user_id = _signup(client, "kid")

    assert client.get(f"/api/users/{user_id}").json()["name"] == "Kid"
    assert [u["id"] for u in client.get("/api/users").json()] == [user_id]
    assert client.get("/api/users/999").status_code == 404


# --- Families ---

def test_family_membership_flow(client):
    mom = _signup(client, "mom", role="admin")
    kid = _signup(client, "kid")
    family_id = _family(client, "Smiths", mom)

    assert _join(client, family_id, mom).status_code == 201
    assert _join(client, family_id, kid).status_code == 201

    members = client.get(f"/api/families/{family_id}/members").json()
    assert [m["id"] for m in members] == [mom, kid]
    assert [f["name"] for f in client.get(f"/api/users/{kid}/families").json()] == ["Smiths"]
    assert client.get(f"/api/families/{family_id}").json()["created_by"] == mom


def test_duplicate_membership_conflicts(client):
    mom = _signup(client, "mom")
    family_id = _family(client, "Once", mom)
    _join(client, family_id, mom)

    r = _join(client, family_id, mom)
    assert r.status_code == 409


def test_membership_with_missing_parent_is_404(client):
    mom = _signup(client, "mom")

    assert _join(client, 404, mom).status_code == 404
    assert client.post("/api/families", json={"name": "Nobody's", "created_by": 999}).status_code == 404
    assert client.get("/api/families/999").status_code == 404


# --- Goals & progress ---

def test_goal_target_must_be_positive(client):
    user_id = _signup(client, "mom")
    r = client.post("/api/goals", json={
        "name": "Nothing", "type": "daily", "target_value": 0, "unit": "steps", "user_id": user_id,
    })
    assert r.status_code == 422


def test_daily_progress(client):
    user_id = _signup(client, "mom")
    _goal(client, user_id, target=100, current=50)
    _goal(client, user_id, target=20, current=20)

    assert client.get(f"/api/users/{user_id}/daily-progress").json() == {"progress": 75}


def test_progress_defaults_for_unknown_ids(client):
    assert client.get("/api/users/999/daily-progress").json() == {"progress": 0}
    r = client.get("/api/families/999/progress")
    assert r.status_code == 200
    assert r.json() == []


def test_past_due_goal_is_ignored(client):
    user_id = _signup(client, "mom")
    _goal(client, user_id, target=10, current=0, due_date="2000-01-01T00:00:00")

    assert client.get(f"/api/users/{user_id}/daily-progress").json()["progress"] == 0


def test_family_progress_per_member(client):
    a = _signup(client, "anna")
    b = _signup(client, "ben")
    family_id = _family(client, "Progress", a)
    _join(client, family_id, a)
    _join(client, family_id, b)
    _goal(client, a, target=100, current=50)
    _goal(client, a, target=20, current=20)

    r = client.get(f"/api/families/{family_id}/progress")
    assert r.status_code == 200
    assert r.json() == [{"user_id": a, "progress": 75}, {"user_id": b, "progress": 0}]


def test_family_summary(client):
    a = _signup(client, "anna")
    b = _signup(client, "ben")
    family_id = _family(client, "Summary", a)
    _join(client, family_id, a)
    _join(client, family_id, b)
    _goal(client, a, target=10, current=10)

    data = client.get(f"/api/families/{family_id}/summary").json()
    assert data["name"] == "Summary"
    assert data["member_count"] == 2
    assert data["average_progress"] == 50
    assert client.get("/api/families/999/summary").status_code == 404


def test_patch_goal_moves_progress(client):
    user_id = _signup(client, "mom")
    goal = _goal(client, user_id, target=8)

    r = client.patch(f"/api/goals/{goal['id']}", json={"current_value": 5})
    assert r.status_code == 200
    assert r.json()["current_value"] == 5
    assert r.json()["target_value"] == 8
    assert client.get(f"/api/users/{user_id}/daily-progress").json()["progress"] == 63

    r = client.patch(f"/api/goals/{goal['id']}", json={"completed": True, "current_value": 8})
    assert r.json()["completed"] is True
    assert [g["current_value"] for g in client.get(f"/api/users/{user_id}/goals").json()] == [8]


def test_patch_goal_errors(client):
    user_id = _signup(client, "mom")
    goal = _goal(client, user_id, target=8)

    assert client.patch("/api/goals/999", json={"current_value": 1}).status_code == 404
    assert client.patch(f"/api/goals/{goal['id']}", json={"target_value": 0}).status_code == 422


# --- Activities & stats ---

def test_recent_activities(client):
    user_id = _signup(client, "runner")
    for day in (3, 1, 2):
        r = client.post("/api/activities", json={
            "name": f"Run {day}",
            "type": "running",
            "duration": 20 + day,
            "date": f"2026-10-0{day}T07:00:00",
            "user_id": user_id,
        })
        assert r.status_code == 201, r.text

    recent = client.get(f"/api/users/{user_id}/recent-activities?limit=2").json()
    assert [a["name"] for a in recent] == ["Run 3", "Run 2"]
    assert len(client.get(f"/api/users/{user_id}/activities").json()) == 3
    assert client.get(f"/api/users/{user_id}/recent-activities?limit=0").status_code == 422


def test_activity_for_missing_user_is_404(client):
    r = client.post("/api/activities", json={"name": "Ghost run", "type": "running", "duration": 5, "user_id": 42})
    assert r.status_code == 404


def test_activity_stats_window(client):
    user_id = _signup(client, "walker")
    r = client.post("/api/activity-stats", json={"user_id": user_id, "activity_type": "steps", "value": 4200.5})
    assert r.status_code == 201
    client.post("/api/activity-stats", json={
        "user_id": user_id, "activity_type": "steps", "value": 9000, "date": "2001-01-01T00:00:00",
    })
    client.post("/api/activity-stats", json={"user_id": user_id, "activity_type": "exercise_minutes", "value": 30})

    stats = client.get(f"/api/users/{user_id}/activity-stats").json()
    assert [s["value"] for s in stats] == [4200.5, 30]

    steps = client.get(f"/api/users/{user_id}/activity-stats?days=7&activity_type=steps").json()
    assert [s["activity_type"] for s in steps] == ["steps"]


# --- Schedule ---

def _event(client, title, start, end, created_by):
    r = client.post("/api/schedule-events", json={
        "title": title, "start_time": start, "end_time": end, "created_by": created_by,
    })
    assert r.status_code == 201, r.text
    return r.json()["id"]


def test_schedule_by_day_and_user(client):
    mom = _signup(client, "mom")
    kid = _signup(client, "kid")
    soccer = _event(client, "Soccer", "2026-10-18T09:00:00", "2026-10-18T10:00:00", mom)
    _event(client, "Breakfast", "2026-10-18T07:00:00", "2026-10-18T07:30:00", mom)
    _event(client, "Next day", "2026-10-19T07:00:00", "2026-10-19T07:30:00", mom)

    day = client.get("/api/schedule-events?date=2026-10-18").json()
    assert [e["title"] for e in day] == ["Breakfast", "Soccer"]

    assert client.post("/api/event-assignees", json={"event_id": soccer, "user_id": kid}).status_code == 201
    assert client.post("/api/event-assignees", json={"event_id": soccer, "user_id": kid}).status_code == 409

    assert [u["id"] for u in client.get(f"/api/schedule-events/{soccer}/assignees").json()] == [kid]
    kid_day = client.get(f"/api/users/{kid}/schedule?date=2026-10-18").json()
    assert [e["title"] for e in kid_day] == ["Soccer"]


def test_schedule_rejects_bad_input(client):
    mom = _signup(client, "mom")

    assert client.get("/api/schedule-events?date=not-a-date").status_code == 400
    assert client.get(f"/api/users/{mom}/schedule?date=18/10/2026").status_code == 400
    r = client.post("/api/schedule-events", json={
        "title": "Backwards",
        "start_time": "2026-10-18T10:00:00",
        "end_time": "2026-10-18T09:00:00",
        "created_by": mom,
    })
    assert r.status_code == 400


# --- Health tips ---

def test_seeded_health_tips(client):
    tips = client.get("/api/health-tips").json()
    assert len(tips) == 3
    assert client.get("/api/health-tips/random").status_code == 200


def test_create_health_tip_lists_first(client):
    r = client.post("/api/health-tips", json={"title": "Stretch", "content": "Stretch after runs.", "type": "fitness"})
    assert r.status_code == 201

    tips = client.get("/api/health-tips?limit=1").json()
    assert [t["title"] for t in tips] == ["Stretch"]


@pytest.mark.parametrize("limit", [0, 51])
def test_health_tip_limit_bounds(client, limit):
    assert client.get(f"/api/health-tips?limit={limit}").status_code == 422
