from datetime import date, timedelta


def _task(client, headers, task_date, category, planned, actual=None, status=None, title="t"):
    resp = client.post(
        "/api/tasks",
        json={"title": title, "category": category, "planned_hours": planned, "task_date": task_date.isoformat()},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    patch = {}
    if actual is not None:
        patch["actual_hours"] = actual
    if status is not None:
        patch["status"] = status
    if patch:
        assert client.put(f"/api/tasks/{resp.json()['id']}", json=patch, headers=headers).status_code == 200


def test_daily_summary(client, auth_headers):
    today = date.today()
    _task(client, auth_headers, today, "Math", 2, actual=2, status="completed")
    _task(client, auth_headers, today, "Math", 1, actual=0.5, status="partial")
    _task(client, auth_headers, today, "Reading", 1, status="skipped")
    _task(client, auth_headers, today - timedelta(days=1), "Math", 5, actual=5, status="completed")

    resp = client.get("/api/analytics/daily", headers=auth_headers)

    assert resp.status_code == 200
    assert resp.json() == {
        "date": today.isoformat(),
        "totalTasks": 3,
        "totalPlannedHours": 4.0,
        "totalActualHours": 2.5,
        "completedTasks": 1,
        "partialTasks": 1,
        "skippedTasks": 1,
        "completionPercentage": 63,
    }


def test_daily_summary_for_empty_day(client, auth_headers):
    resp = client.get("/api/analytics/daily", params={"date": "2020-01-01"}, headers=auth_headers)

    body = resp.json()
    assert body["totalTasks"] == 0
    assert body["totalPlannedHours"] == 0
    assert body["completionPercentage"] == 0


def test_daily_summary_rejects_bad_date(client, auth_headers):
    resp = client.get("/api/analytics/daily", params={"date": "yesterday"}, headers=auth_headers)
    assert resp.status_code == 400


def test_weekly_summary(client, auth_headers):
    today = date.today()
    _task(client, auth_headers, today, "Math", 2, actual=2)
    _task(client, auth_headers, today, "Math", 1, actual=1)
    _task(client, auth_headers, today - timedelta(days=2), "Reading", 3, actual=3.5)
    _task(client, auth_headers, today - timedelta(days=30), "Math", 9, actual=9)

    resp = client.get("/api/analytics/weekly", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["dailyBreakdown"] == [
        {"task_date": today.isoformat(), "category": "Math", "hours": 3.0},
        {"task_date": (today - timedelta(days=2)).isoformat(), "category": "Reading", "hours": 3.5},
    ]
    assert body["categoryStats"] == [
        {"category": "Reading", "total_hours": 3.5, "task_count": 1},
        {"category": "Math", "total_hours": 3.0, "task_count": 2},
    ]


def test_monthly_summary(client, auth_headers):
    _task(client, auth_headers, date(2024, 2, 3), "Math", 2, actual=1)
    _task(client, auth_headers, date(2024, 2, 3), "Reading", 2, actual=2)
    _task(client, auth_headers, date(2024, 2, 29), "Math", 1, actual=1)
    _task(client, auth_headers, date(2024, 3, 1), "Math", 4, actual=4)

    resp = client.get("/api/analytics/monthly", params={"month": "2024-02"}, headers=auth_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["month"] == "2024-02"
    assert body["dailyBreakdown"] == [
        {"date": "2024-02-03", "hours": 3.0},
        {"date": "2024-02-29", "hours": 1.0},
    ]
    assert body["categoryStats"] == [
        {"category": "Math", "total_hours": 2.0, "task_count": 2},
        {"category": "Reading", "total_hours": 2.0, "task_count": 1},
    ]


def test_monthly_summary_rejects_malformed_month(client, auth_headers):
    for bad in ("2024-13", "2024/02", "Feb"):
        resp = client.get("/api/analytics/monthly", params={"month": bad}, headers=auth_headers)
        assert resp.status_code == 400, bad


def _record(client, headers, day, hours=1.0, count=1):
    resp = client.post(
        "/api/analytics/streak/update",
        json={"date": day.isoformat(), "hours": hours, "taskCount": count},
        headers=headers,
    )
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"message": "Streak updated successfully"}


def test_streak_with_gap_before_three_days(client, auth_headers):
    today = date.today()
    for offset in (0, 1, 2, 4):
        _record(client, auth_headers, today - timedelta(days=offset))

    body = client.get("/api/analytics/streak", headers=auth_headers).json()

    assert body["currentStreak"] == 3
    assert body["longestStreak"] == 3
    assert [e["streak_date"] for e in body["streakHistory"]] == [
        (today - timedelta(days=n)).isoformat() for n in (0, 1, 2, 4)
    ]


def test_streak_with_gap_yesterday(client, auth_headers):
    today = date.today()
    for offset in (0, 2, 3):
        _record(client, auth_headers, today - timedelta(days=offset))

    body = client.get("/api/analytics/streak", headers=auth_headers).json()

    assert body["currentStreak"] == 1
    assert body["longestStreak"] == 2


def test_streak_update_is_idempotent_per_day(client, auth_headers):
    today = date.today()
    _record(client, auth_headers, today, hours=1, count=1)
    _record(client, auth_headers, today, hours=4.5, count=3)

    history = client.get("/api/analytics/streak", headers=auth_headers).json()["streakHistory"]

    assert history == [{"streak_date": today.isoformat(), "hours_completed": 4.5, "tasks_completed": 3}]


def test_streak_empty(client, auth_headers):
    body = client.get("/api/analytics/streak", headers=auth_headers).json()
    assert body == {"currentStreak": 0, "longestStreak": 0, "streakHistory": []}


def test_streak_reads_only_the_configured_window(app, client, auth_headers):
    app.state.settings = app.state.settings.model_copy(update={"streak_window": 2})
    today = date.today()
    for offset in (0, 1, 2):
        _record(client, auth_headers, today - timedelta(days=offset))

    body = client.get("/api/analytics/streak", headers=auth_headers).json()

    assert body["currentStreak"] == 2
    assert body["longestStreak"] == 2
    assert [e["streak_date"] for e in body["streakHistory"]] == [
        today.isoformat(),
        (today - timedelta(days=1)).isoformat(),
    ]
