"""
End-to-end tests through the HTTP layer.

Fixtures commit their rows before any request is made, and assertions go
through the API, so the test session never holds a transaction open
while the application uses the shared in-memory connection.
"""

from fastapi.testclient import TestClient

from app.api import deps
from app.core.security import jwt_manager
from app.models.base import RoomStatus


def create_student(client, n, room_id=None, **extra):
    payload = {
        "student_id": f"API-{n}",
        "first_name": "Meera",
        "last_name": f"Nair{n}",
        "email": f"meera{n}@example.com",
        "room_id": room_id,
    }
    payload.update(extra)
    return client.post("/api/v1/students", json=payload)


def get_room(client, room_id):
    response = client.get(f"/api/v1/rooms/{room_id}")
    assert response.status_code == 200
    return response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "X-Request-ID" in response.headers


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_student_lifecycle_keeps_room_in_sync(client, hostel, make_room):
    room = make_room(hostel, room_number="A", capacity=2)

    s1 = create_student(client, 1, room.id)
    assert s1.status_code == 201
    assert get_room(client, room.id)["status"] == "partially_occupied"

    assert create_student(client, 2, room.id).status_code == 201
    body = get_room(client, room.id)
    assert (body["current_occupancy"], body["status"], body["available_spots"]) == (2, "occupied", 0)

    response = client.delete(f"/api/v1/students/{s1.json()['id']}")
    assert response.status_code == 200
    body = get_room(client, room.id)
    assert (body["current_occupancy"], body["status"]) == (1, "partially_occupied")


def test_room_full_returns_400(client, hostel, make_room):
    room = make_room(hostel, capacity=1)
    assert create_student(client, 1, room.id).status_code == 201

    response = create_student(client, 2, room.id)

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Room is full"
    assert response.json()["error"]["code"] == "INSUFFICIENT_CAPACITY"
    assert len(client.get("/api/v1/students").json()) == 1


def test_invalid_email_is_422(client):
    response = create_student(client, 1, email="not-an-email")
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_maintenance_room_scenario(client, hostel, make_room):
    room = make_room(hostel, room_number="B", capacity=1)
    response = client.put(f"/api/v1/rooms/{room.id}", json={"status": "maintenance"})
    assert response.json()["status"] == "maintenance"

    assert create_student(client, 3, room.id).status_code == 201

    body = get_room(client, room.id)
    assert (body["current_occupancy"], body["status"]) == (1, "maintenance")


def test_room_routes(client, hostel, make_room, make_room_type):
    make_room_type(type_name="double", capacity=2)

    created = client.post("/api/v1/rooms", json={"room_number": "301", "capacity": 2, "floor": 3})
    assert created.status_code == 201
    assert created.json()["hostel_id"] == hostel.id

    duplicate = client.post("/api/v1/rooms", json={"room_number": "301", "capacity": 2})
    assert duplicate.status_code == 400
    assert duplicate.json()["error"]["message"] == "Room number already exists"

    available = client.get("/api/v1/rooms/available")
    assert [room["room_number"] for room in available.json()] == ["301"]

    room_type = client.post("/api/v1/rooms/types", json={"type_name": "suite", "capacity": 4})
    assert room_type.status_code == 403
    assert [rt["type_name"] for rt in client.get("/api/v1/rooms/types").json()] == ["double"]

    filtered = client.get("/api/v1/rooms", params={"status": "occupied"})
    assert filtered.json() == []


def test_allocate_and_reconcile(client, hostel, make_room, make_student):
    room = make_room(hostel, capacity=1)
    student = make_student(hostel)

    response = client.post("/api/v1/rooms/allocate", json={"student_id": student.id, "room_id": room.id})
    assert response.status_code == 200
    assert response.json()["room"]["status"] == "occupied"

    other = make_student(hostel)
    response = client.post("/api/v1/rooms/allocate", json={"student_id": other.id, "room_id": room.id})
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Room is full"

    response = client.post(f"/api/v1/rooms/{room.id}/reconcile")
    assert response.json() == {
        "room_id": room.id,
        "current_occupancy": 1,
        "status": "occupied",
        "status_frozen": False,
    }


def test_stale_room_repaired_by_reconcile_endpoint(client, hostel, make_room):
    room = make_room(hostel, capacity=2, current_occupancy=2, status=RoomStatus.OCCUPIED)

    response = client.post(f"/api/v1/rooms/{room.id}/reconcile")

    assert response.json()["current_occupancy"] == 0
    assert response.json()["status"] == "available"


def test_transfer_flow(client, hostel, make_room):
    room_a = make_room(hostel, room_number="A", capacity=2)
    room_c = make_room(hostel, room_number="C", capacity=2)
    mover = create_student(client, 1, room_a.id).json()
    create_student(client, 2, room_a.id)

    created = client.post("/api/v1/room-transfers", json={"student_id": mover["id"], "to_room_id": room_c.id})
    assert created.status_code == 201
    transfer = created.json()
    assert (transfer["status"], transfer["from_room_id"]) == ("pending", room_a.id)

    response = client.put(f"/api/v1/room-transfers/{transfer['id']}", json={"status": "approved"})
    assert response.status_code == 200
    assert response.json()["status"] == "approved"

    assert client.get(f"/api/v1/students/{mover['id']}").json()["room_id"] == room_c.id
    body_a, body_c = get_room(client, room_a.id), get_room(client, room_c.id)
    assert (body_a["current_occupancy"], body_a["status"]) == (1, "partially_occupied")
    assert (body_c["current_occupancy"], body_c["status"]) == (1, "partially_occupied")

    conflict = client.post(f"/api/v1/room-transfers/{transfer['id']}/reject")
    assert conflict.status_code == 409

    again = client.post(f"/api/v1/room-transfers/{transfer['id']}/approve")
    assert again.status_code == 200

    listed = client.get("/api/v1/room-transfers", params={"status": "approved"})
    assert [item["id"] for item in listed.json()] == [transfer["id"]]


def test_transfer_to_full_room_is_not_persisted(client, hostel, make_room):
    room_a = make_room(hostel, room_number="A", capacity=2)
    room_c = make_room(hostel, room_number="C", capacity=1)
    mover = create_student(client, 1, room_a.id).json()
    create_student(client, 2, room_a.id)
    create_student(client, 3, room_c.id)

    response = client.post("/api/v1/room-transfers", json={"student_id": mover["id"], "to_room_id": room_c.id})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Destination room is full"
    assert client.get("/api/v1/room-transfers").json() == []


def test_transfer_decision_rejects_pending(client):
    response = client.put("/api/v1/room-transfers/any", json={"status": "pending"})
    assert response.status_code == 422


def test_scoped_admin_cannot_read_other_hostel(client, make_hostel, make_room):
    other_room = make_room(make_hostel(name="Elsewhere"))

    response = client.get(f"/api/v1/rooms/{other_room.id}")

    assert response.status_code == 403
    assert client.get("/api/v1/hostels").status_code == 403


def test_unknown_room_is_404(client):
    response = client.get("/api/v1/rooms/missing")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


def test_super_admin_hostels(super_client):
    created = super_client.post("/api/v1/hostels", json={"name": "East Wing", "email": "east@example.com"})
    assert created.status_code == 201
    hostel_id = created.json()["id"]

    updated = super_client.put(f"/api/v1/hostels/{hostel_id}", json={"phone": "555-0199"})
    assert updated.json()["phone"] == "555-0199"

    names = [hostel["name"] for hostel in super_client.get("/api/v1/hostels").json()]
    assert "East Wing" in names

    room = super_client.post("/api/v1/rooms", params={"hostel_id": hostel_id}, json={"room_number": "1", "capacity": 1})
    assert room.json()["hostel_id"] == hostel_id


def test_bearer_token_authentication(app, admin_user, hostel):
    app.dependency_overrides.pop(deps.get_current_user, None)
    token = jwt_manager.create_access_token(admin_user.id)

    with TestClient(app) as client:
        assert client.get("/api/v1/rooms").status_code == 401
        assert client.get("/api/v1/rooms", headers={"Authorization": "Bearer junk"}).status_code == 401

        response = client.get("/api/v1/rooms", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json() == []


def test_caller_without_hostel_is_forbidden(app, make_user):
    user = make_user(role="staff", hostel_id=None)
    token = jwt_manager.create_access_token(user.id)

    with TestClient(app) as client:
        response = client.get("/api/v1/students", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403
    assert response.json()["error"]["message"] == "No hostel assigned to user"


def test_super_admin_deletes_hostel_without_students(super_client, make_hostel, make_room, make_student):
    annex = make_hostel(name="Annex")
    make_room(annex, room_number="1")
    main = make_hostel(name="Main")
    make_student(main)

    blocked = super_client.delete(f"/api/v1/hostels/{main.id}")
    assert blocked.status_code == 409
    assert blocked.json()["error"]["code"] == "CONFLICT"

    deleted = super_client.delete(f"/api/v1/hostels/{annex.id}")
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Hostel deleted successfully"

    assert super_client.get(f"/api/v1/hostels/{annex.id}").status_code == 404
    assert super_client.get(f"/api/v1/hostels/{main.id}").status_code == 200
