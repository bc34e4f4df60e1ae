"""
Submission, listing and retrieval through the HTTP API
"""

from datetime import datetime, timedelta

from hrapply.services.application_store import ApplicationStore


def test_submit_returns_generated_id(client):
    response = client.post("/api/submit", json={"firstNameEn": "Somchai", "age": "35"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert isinstance(body["id"], int)


def test_submitted_record_round_trips_with_integer_coercion(client):
    submitted = {
        "firstNameEn": "Somchai",
        "lastNameTh": "ใจดี",
        "age": "35",
        "height": "",
        "weight": "abc",
        "family1Age": 61,
        "englishSpoken": "good",
        "hasComputer": True,
    }
    application_id = client.post("/api/submit", json=submitted).json()["id"]

    body = client.get(f"/api/applications/{application_id}").json()

    assert body["success"] is True
    data = body["data"]
    assert data["id"] == application_id
    assert data["age"] == 35
    assert data["height"] is None
    assert data["weight"] is None
    assert data["family1Age"] == 61
    assert data["family2Age"] is None
    assert data["numberOfChildren"] is None
    assert data["lastNameTh"] == "ใจดี"
    assert data["hasComputer"] is True
    assert data["status"] == "pending"
    assert data["created_at"]


def test_server_fields_override_client_values(client):
    application_id = client.post("/api/submit", json={
        "status": "approved",
        "created_at": "1999-01-01T00:00:00",
        "id": 999,
    }).json()["id"]

    data = client.get(f"/api/applications/{application_id}").json()["data"]

    assert data["status"] == "pending"
    assert not data["created_at"].startswith("1999")
    assert data["id"] == application_id


def test_list_returns_newest_first(client):
    ids = [client.post("/api/submit", json={"nickname": name}).json()["id"] for name in ("a", "b", "c")]

    body = client.get("/api/applications").json()

    assert body["success"] is True
    assert [row["id"] for row in body["data"]] == list(reversed(ids))


def test_list_is_empty_without_applications(client):
    assert client.get("/api/applications").json() == {"success": True, "data": []}


def test_missing_application_is_a_failure(client):
    response = client.get("/api/applications/4242")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert "4242" in body["error"]
    assert "data" not in body


def test_non_numeric_id_is_a_failure(client):
    response = client.get("/api/applications/not-a-number")

    assert response.status_code == 500
    assert response.json()["success"] is False


def test_submit_rejects_non_object_body(client):
    response = client.post("/api/submit", json=["not", "a", "record"])

    assert response.status_code == 500
    assert response.json()["success"] is False


async def test_listing_orders_by_creation_time_for_any_insertion_order(context):
    database = context.database
    await database.create_tables()
    base = datetime(2024, 1, 1, 8, 0, 0)

    try:
        async with database.session() as session:
            store = ApplicationStore(session)
            for day in (2, 0, 3, 1):
                await store.create({"nickname": f"day{day}"}, created_at=base + timedelta(days=day))

            listed = await store.list()
    finally:
        await database.dispose()

    assert [row["nickname"] for row in listed] == ["day3", "day2", "day1", "day0"]


def test_zero_string_is_stored_as_null_but_numeric_zero_is_kept(client):
    application_id = client.post("/api/submit", json={"numberOfChildren": "0", "family4Age": 0}).json()["id"]

    data = client.get(f"/api/applications/{application_id}").json()["data"]

    assert data["numberOfChildren"] is None
    assert data["family4Age"] == 0
