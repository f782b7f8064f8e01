"""PUT bodies: explicit nulls on required fields are rejected, optional ones are cleared."""

import pytest

from tests.factories import appointment_payload, client_payload, patient_payload


INVOICE = {
    "clientName": "Amina Rahman",
    "clientEmail": "amina@example.com",
    "items": [{"description": "Consultation", "quantity": 1, "unitPrice": 150}],
    "taxRate": 10,
    "notes": "Pay on arrival",
}

RESOURCES = [
    ("/api/clients", client_payload(), "firstName"),
    ("/api/clients", client_payload(), "visaApplicationDate"),
    ("/api/clients", client_payload(), "specialRequirements"),
    ("/api/patients", patient_payload(), "name"),
    ("/api/patients", patient_payload(), "medicalHistory"),
    ("/api/appointments", appointment_payload(), "appointmentDate"),
    ("/api/appointments", appointment_payload(), "status"),
    ("/api/billing/invoices", INVOICE, "taxRate"),
    ("/api/billing/invoices", INVOICE, "items"),
    ("/api/payment-billing/payments", {"applicationId": "APP-1", "amount": 500}, "amount"),
    ("/api/payment-billing/fee-structures", {"name": "UK Student", "governmentFee": 490, "serviceFee": 200}, "serviceFee"),
    ("/api/visa-applications", {"applicantName": "Amina Rahman", "visaType": "Student"}, "agent"),
]


@pytest.mark.parametrize("path,payload,field", RESOURCES)
async def test_null_for_required_field_is_rejected(client, path, payload, field):
    created = await client.post(path, json=payload)
    assert created.status_code == 201, created.text
    item = created.json()
    
    response = await client.put(f"{path}/{item['id']}", json={field: None})
    
    assert response.status_code == 400
    assert field in response.json()["error"]
    unchanged = (await client.get(f"{path}/{item['id']}")).json()
    assert unchanged[field] == item[field]


async def test_null_clears_optional_client_fields(client):
    created = (await client.post(
        "/api/clients",
        json=client_payload(city="Dhaka", emergencyContact={"name": "Rafi", "phone": "123"}),
    )).json()
    
    response = await client.put(
        f"/api/clients/{created['id']}",
        json={"city": None, "emergencyContact": None},
    )
    
    assert response.status_code == 200
    body = response.json()
    assert body["city"] is None
    assert body["emergencyContact"] is None
    assert body["firstName"] == "Amina"


async def test_null_client_id_detaches_appointment(client):
    person = (await client.post("/api/clients", json=client_payload())).json()
    appointment = (await client.post(
        "/api/appointments",
        json=appointment_payload(clientId=person["id"], notes="Bring passport"),
    )).json()
    assert appointment["client"]["id"] == person["id"]
    
    response = await client.put(
        f"/api/appointments/{appointment['id']}",
        json={"clientId": None, "notes": None},
    )
    
    assert response.status_code == 200
    body = response.json()
    assert body["client"] is None
    assert body["clientId"] is None
    assert body["notes"] is None
    assert body["clientName"] == "Amina Rahman"


async def test_null_clears_invoice_notes_and_keeps_totals(client):
    invoice = (await client.post("/api/billing/invoices", json=INVOICE)).json()
    
    response = await client.put(f"/api/billing/invoices/{invoice['id']}", json={"notes": None})
    
    assert response.status_code == 200
    body = response.json()
    assert body["notes"] is None
    assert body["taxRate"] == 10
    assert body["totalAmount"] == invoice["totalAmount"]
