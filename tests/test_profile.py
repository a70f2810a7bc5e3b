def test_profile_before_onboarding(client, auth_headers):
    resp = client.get("/api/profile", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"onboarding_completed": False}


def test_first_write_creates_profile(client, auth_headers):
    resp = client.put(
        "/api/profile",
        json={
            "studying_topics": ["Algorithms", "Spanish"],
            "goals": "Pass the exam",
            "focus_areas": ["Graphs"],
            "daily_hours_target": 3.5,
            "onboarding_completed": True,
        },
        headers=auth_headers,
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["studying_topics"] == ["Algorithms", "Spanish"]
    assert body["daily_hours_target"] == 3.5
    assert body["onboarding_completed"] is True

    assert client.get("/api/profile", headers=auth_headers).json()["goals"] == "Pass the exam"


def test_first_write_without_flag_is_not_onboarded(client, auth_headers):
    body = client.put("/api/profile", json={"goals": "x"}, headers=auth_headers).json()
    assert body["onboarding_completed"] is False
    assert body["focus_areas"] is None


def test_goals_only_update_keeps_focus_areas(client, auth_headers):
    client.put(
        "/api/profile",
        json={"goals": "Old goal", "focus_areas": ["Graphs", "DP"], "daily_hours_target": 2},
        headers=auth_headers,
    )

    resp = client.put("/api/profile", json={"goals": "New goal"}, headers=auth_headers)

    body = resp.json()
    assert body["goals"] == "New goal"
    assert body["focus_areas"] == ["Graphs", "DP"]
    assert body["daily_hours_target"] == 2


def test_null_fields_keep_stored_values(client, auth_headers):
    client.put("/api/profile", json={"goals": "Keep me", "onboarding_completed": True}, headers=auth_headers)

    body = client.put(
        "/api/profile",
        json={"goals": None, "onboarding_completed": None, "studying_topics": ["Math"]},
        headers=auth_headers,
    ).json()

    assert body["goals"] == "Keep me"
    assert body["onboarding_completed"] is True
    assert body["studying_topics"] == ["Math"]


def test_profiles_are_per_user(client, auth_headers, other_user_headers):
    client.put("/api/profile", json={"goals": "mine"}, headers=auth_headers)

    resp = client.get("/api/profile", headers=other_user_headers)
    assert resp.json() == {"onboarding_completed": False}


def test_profile_rejects_impossible_daily_target(client, auth_headers):
    resp = client.put("/api/profile", json={"daily_hours_target": 30}, headers=auth_headers)
    assert resp.status_code == 400
