"""Appointments: booking, client join, filters and 404s."""

from tests.factories import appointment_payload, client_payload


async def create_client(client, **overrides) -> dict:
    return (await client.post("/api/clients", json=client_payload(**overrides))).json()


async def test_create_appointment_with_contact_details(client):
    response = await client.post("/api/appointments", json=appointment_payload())
    
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["appointmentDate"] == "2024-06-10"
    assert body["appointmentType"] == "visa-consultation"
    assert body["status"] == "scheduled"
    assert body["clientId"] is None
    assert body["client"] is None


async def test_create_appointment_from_client_reference(client):
    created_client = await create_client(client)
    
    response = await client.post(
        "/api/appointments",
        json={
            "clientId": created_client["id"],
            "consultantName": "Sarah Lee",
            "appointmentDate": "2024-06-11",
            "appointmentTime": "09:00",
        },
    )
    
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["clientName"] == "Amina Rahman"
    assert body["clientEmail"] == "amina@example.com"
    assert body["client"] == {
        "id": created_client["id"],
        "clientId": "CLI-0001",
        "name": "Amina Rahman",
        "email": "amina@example.com",
        "phone": "+8801700000000",
    }


async def test_create_appointment_missing_contact(client):
    payload = appointment_payload()
    del payload["clientPhone"]
    
    response = await client.post("/api/appointments", json=payload)
    
    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields: clientPhone"


async def test_create_appointment_unknown_client(client):
    response = await client.post(
        "/api/appointments",
        json=appointment_payload(clientId="665f1c2e9b1d4a0012345678"),
    )
    
    assert response.status_code == 404


async def test_invalid_time_is_rejected(client):
    response = await client.post("/api/appointments", json=appointment_payload(appointmentTime="25:00"))
    
    assert response.status_code == 400


async def test_join_is_null_after_client_deleted(client):
    created_client = await create_client(client)
    appointment = (await client.post(
        "/api/appointments",
        json=appointment_payload(clientId=created_client["id"]),
    )).json()
    
    await client.delete(f"/api/clients/{created_client['id']}")
    
    body = (await client.get(f"/api/appointments/{appointment['id']}")).json()
    assert body["clientId"] == created_client["id"]
    assert body["client"] is None
    assert body["clientName"] == "Amina Rahman"


async def test_list_filters_and_order(client):
    created_client = await create_client(client)
    await client.post("/api/appointments", json=appointment_payload(appointmentDate="2024-06-10", appointmentTime="09:00"))
    await client.post("/api/appointments", json=appointment_payload(appointmentDate="2024-06-10", appointmentTime="14:00", status="confirmed"))
    await client.post("/api/appointments", json=appointment_payload(appointmentDate="2024-06-12", clientId=created_client["id"]))
    
    listing = (await client.get("/api/appointments")).json()
    assert listing["total"] == 3
    assert [(a["appointmentDate"], a["appointmentTime"]) for a in listing["appointments"]] == [
        ("2024-06-12", "10:30"),
        ("2024-06-10", "14:00"),
        ("2024-06-10", "09:00"),
    ]
    
    by_date = (await client.get("/api/appointments", params={"date": "2024-06-10"})).json()
    assert by_date["total"] == 2
    
    by_status = (await client.get("/api/appointments", params={"status": "confirmed"})).json()
    assert [a["appointmentTime"] for a in by_status["appointments"]] == ["14:00"]
    
    by_client = (await client.get("/api/appointments", params={"clientId": created_client["id"]})).json()
    assert by_client["total"] == 1
    assert by_client["appointments"][0]["client"]["clientId"] == "CLI-0001"


async def test_update_and_delete_appointment(client):
    appointment = (await client.post("/api/appointments", json=appointment_payload())).json()
    
    response = await client.put(
        f"/api/appointments/{appointment['id']}",
        json={"status": "completed", "appointmentDate": "2024-06-15", "consultationNotes": "Docs complete"},
    )
    
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "completed"
    assert body["appointmentDate"] == "2024-06-15"
    assert body["consultationNotes"] == "Docs complete"
    assert body["consultantName"] == "Sarah Lee"
    
    response = await client.delete(f"/api/appointments/{appointment['id']}")
    assert response.json() == {"message": "Appointment deleted successfully"}


async def test_missing_appointment_is_404(client):
    missing = "665f1c2e9b1d4a0012345678"
    
    assert (await client.get(f"/api/appointments/{missing}")).status_code == 404
    assert (await client.put(f"/api/appointments/{missing}", json={"status": "confirmed"})).status_code == 404
    assert (await client.delete(f"/api/appointments/{missing}")).status_code == 404
