"""
HTTP integration tests - full app with lifespan, through TestClient.
"""

from datetime import timedelta

from backend.src.domain import utc_now


def future_iso(days: int = 3) -> str:
    return (utc_now() + timedelta(days=days)).isoformat()


def create_category(client, name="Work", **fields):
    response = client.post("/api/categories", json={"name": name, **fields})
    assert response.status_code == 201, response.text
    return response.json()


def create_task(client, title="Task", **fields):
    response = client.post("/api/todotasks", json={"title": title, **fields})
    assert response.status_code == 201, response.text
    return response.json()


# ==================== Health ====================

def test_health_probes(client):
    assert client.get("/api/health/live").json() == {"status": "live"}

    ready = client.get("/api/health/ready")
    assert ready.status_code == 200
    assert ready.json()["status"] == "ready"


# ==================== Todo tasks ====================

def test_create_todo_task_returns_201_with_location(client):
    category = create_category(client, "Work", color=3)

    response = client.post(
        "/api/todotasks",
        json={
            "title": "  Write report ",
            "description": "Q3",
            "category_id": category["id"],
            "assigned_to": 1,
            "due_date": future_iso(),
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert response.headers["location"] == f"/api/todotasks/{body['id']}"
    assert body["title"] == "Write report"
    assert body["is_completed"] is False
    assert body["is_overdue"] is False
    assert body["category"]["name"] == "Work"
    assert body["category"]["color_hex"] == "#ffc107"


def test_create_todo_task_validation_failure_is_400(client):
    response = client.post("/api/todotasks", json={"title": "x" * 51})

    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Validation failed"
    assert body["errors"] == [
        {"field": "title", "message": "Title cannot exceed 50 characters"}
    ]


def test_create_todo_task_with_unknown_category_is_404(client):
    response = client.post("/api/todotasks", json={"title": "Task", "category_id": 12})
    assert response.status_code == 404
    assert response.json()["detail"] == 'Entity "Category" (12) was not found.'


def test_malformed_body_is_422(client):
    response = client.post("/api/todotasks", json={"description": "no title"})

    assert response.status_code == 422
    body = response.json()
    assert body["detail"] == "Validation error"
    assert any("title" in e["field"] for e in body["errors"])


def test_get_todo_task(client):
    created = create_task(client, "Read")

    response = client.get(f"/api/todotasks/{created['id']}")
    assert response.status_code == 200
    assert response.json()["title"] == "Read"

    assert client.get("/api/todotasks/999").status_code == 404
    assert client.get("/api/todotasks/0").status_code == 400


def test_update_todo_task_applies_only_sent_fields(client):
    created = create_task(client, "Old", description="keep", assigned_to=3)

    response = client.put(f"/api/todotasks/{created['id']}", json={"title": "New"})
    assert response.status_code == 204

    body = client.get(f"/api/todotasks/{created['id']}").json()
    assert body["title"] == "New"
    assert body["description"] == "keep"
    assert body["assigned_to"] == 3
    assert body["updated_at"] is not None


def test_update_todo_task_explicit_null_clears_field(client):
    created = create_task(client, "Task", description="remove me")

    response = client.put(f"/api/todotasks/{created['id']}", json={"description": None})
    assert response.status_code == 204

    body = client.get(f"/api/todotasks/{created['id']}").json()
    assert body["description"] is None


def test_update_todo_task_null_title_is_400(client):
    created = create_task(client, "Task")

    response = client.put(f"/api/todotasks/{created['id']}", json={"title": None})

    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"field": "title", "message": "Title cannot be empty"}
    ]


def test_update_missing_todo_task_is_404(client):
    assert client.put("/api/todotasks/77", json={"title": "x"}).status_code == 404


def test_complete_todo_task(client):
    created = create_task(client, "Finish")

    response = client.post(f"/api/todotasks/{created['id']}/complete")
    assert response.status_code == 200
    assert response.json()["is_completed"] is True
    assert response.json()["completed_at"] is not None

    again = client.post(f"/api/todotasks/{created['id']}/complete")
    assert again.status_code == 400
    assert again.json()["detail"] == "Task is already completed"


def test_delete_todo_task(client):
    created = create_task(client, "Temp")

    assert client.delete(f"/api/todotasks/{created['id']}").status_code == 204
    assert client.get(f"/api/todotasks/{created['id']}").status_code == 404
    assert client.delete(f"/api/todotasks/{created['id']}").status_code == 404


def test_paged_todo_tasks(client):
    for i in range(5):
        create_task(client, f"Task {i}")

    response = client.get("/api/todotasks/paged", params={"page_number": 3, "page_size": 2})

    assert response.status_code == 200
    body = response.json()
    assert [t["title"] for t in body["items"]] == ["Task 4"]
    assert body["total_count"] == 5
    assert body["total_pages"] == 3
    assert body["has_next_page"] is False
    assert body["has_previous_page"] is True


def test_paged_todo_tasks_rejects_oversized_page(client):
    response = client.get("/api/todotasks/paged", params={"page_size": 101})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "page_size"


# ==================== Categories ====================

def test_category_lifecycle(client):
    created = create_category(client, "Home", description="chores", color=1)
    category_id = created["id"]
    assert created["color_hex"] == "#ffffff"

    response = client.put(
        f"/api/categories/{category_id}",
        json={"name": "House", "color": None},
    )
    assert response.status_code == 204

    body = client.get(f"/api/categories/{category_id}").json()
    assert body["name"] == "House"
    assert body["description"] == "chores"
    assert body["color"] == 1

    assert client.delete(f"/api/categories/{category_id}").status_code == 204
    assert client.get(f"/api/categories/{category_id}").status_code == 404


def test_create_category_with_blank_name_is_400(client):
    response = client.post("/api/categories", json={"name": "   "})

    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"field": "name", "message": "Category name is required"}
    ]


def test_create_category_with_unknown_color_is_rejected(client):
    response = client.post("/api/categories", json={"name": "Work", "color": 9})
    assert response.status_code == 422


def test_category_tasks_endpoint(client):
    work = create_category(client, "Work")
    other = create_category(client, "Other")
    create_task(client, "a", category_id=work["id"])
    create_task(client, "b", category_id=other["id"])
    create_task(client, "c", category_id=work["id"])

    response = client.get(f"/api/categories/{work['id']}/tasks")

    assert response.status_code == 200
    body = response.json()
    assert [t["title"] for t in body["items"]] == ["a", "c"]
    assert body["total_count"] == 2

    assert client.get("/api/categories/404/tasks").status_code == 404


def test_deleted_category_tasks_read_back_without_category(client):
    work = create_category(client, "Work")
    task = create_task(client, "Report", category_id=work["id"])

    client.delete(f"/api/categories/{work['id']}")

    body = client.get(f"/api/todotasks/{task['id']}").json()
    assert body["category_id"] == work["id"]
    assert body["category"] is None


def test_seeded_data_is_served(seeded_client):
    categories = seeded_client.get("/api/categories").json()
    assert [c["name"] for c in categories["items"]] == ["Work", "Personal", "Shopping"]

    tasks = seeded_client.get("/api/todotasks/paged").json()
    assert tasks["total_count"] == 3
    completed = [t for t in tasks["items"] if t["is_completed"]]
    assert [t["title"] for t in completed] == ["Schedule dentist appointment"]


# ==================== Integer bounds ====================

def test_oversized_ids_are_rejected_before_the_store(client):
    huge = "99999999999999999999"

    assert client.get(f"/api/todotasks/{huge}").status_code == 422
    assert client.put(f"/api/todotasks/{huge}", json={"title": "x"}).status_code == 422
    assert client.delete(f"/api/categories/{huge}").status_code == 422
    assert client.get(f"/api/categories/{huge}/tasks").status_code == 422
    assert client.get("/api/todotasks/paged", params={"page_number": huge}).status_code == 422


def test_oversized_references_in_body_are_rejected(client):
    response = client.post("/api/todotasks", json={"title": "t", "assigned_to": 2**64})

    assert response.status_code == 422
    assert any("assigned_to" in e["field"] for e in response.json()["errors"])

    created = create_task(client, "Task")
    response = client.put(
        f"/api/todotasks/{created['id']}", json={"category_id": 2**31}
    )
    assert response.status_code == 422


def test_largest_32_bit_id_is_a_plain_not_found(client):
    assert client.get(f"/api/todotasks/{2**31 - 1}").status_code == 404
