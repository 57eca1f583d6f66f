from __future__ import annotations


def test_analytics_requires_auth(client):
    assert client.get("/api/v1/analytics/summary").status_code == 401
    assert client.get("/api/v1/analytics/charts").status_code == 401


def test_summary(authenticated_client):
    response = authenticated_client.get("/api/v1/analytics/summary")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert data["active_count"] == 2
    assert data["active_percentage"] == 67
    assert data["department_count"] == 3
    assert data["status_counts"] == {"Active": 2, "Vacation": 1}


def test_summary_follows_store_mutations(authenticated_client, store):
    store.delete("1")
    store.delete("2")
    store.delete("3")

    data = authenticated_client.get("/api/v1/analytics/summary").json()
    assert data["total"] == 0
    assert data["active_percentage"] == 0
    assert data["average_salary"] == 0


def test_charts(authenticated_client):
    response = authenticated_client.get("/api/v1/analytics/charts")
    assert response.status_code == 200
    data = response.json()
    assert [d["name"] for d in data["departments"]] == ["Technology", "Design", "Management"]
    assert data["departments"][0] == {"name": "Technology", "value": 1, "percentage": 33.3}
    assert {"name": "Management", "value": 55000} in data["salary_by_department"]
    assert len(data["top_positions"]) == 3
