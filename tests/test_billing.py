"""Invoices, payments and fee structures."""

from tests.factories import client_payload


def invoice_payload(**overrides) -> dict:
    payload = {
        "clientName": "Amina Rahman",
        "clientEmail": "amina@example.com",
        "items": [
            {"description": "Consultation", "quantity": 1, "unitPrice": 150, "itemType": "consultation"},
            {"description": "Document translation", "quantity": 3, "unitPrice": 40.5, "itemType": "service"},
        ],
        "taxRate": 10,
        "depositAmount": 50,
    }
    payload.update(overrides)
    return payload


async def test_create_invoice_computes_totals(client):
    response = await client.post("/api/billing/invoices", json=invoice_payload())
    
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["invoiceNumber"] == "INV-0001"
    assert [item["amount"] for item in body["items"]] == [150, 121.5]
    assert body["subtotal"] == 271.5
    assert body["taxAmount"] == 27.15
    assert body["totalAmount"] == 298.65
    assert body["dueAmount"] == 248.65
    assert body["status"] == "draft"
    assert body["createdBy"] == "admin@example.com"
    assert body["issuedDate"] is None
    
    second = (await client.post("/api/billing/invoices", json=invoice_payload())).json()
    assert second["invoiceNumber"] == "INV-0002"


async def test_deposit_larger_than_total(client):
    body = (await client.post("/api/billing/invoices", json=invoice_payload(depositAmount=1000))).json()
    
    assert body["dueAmount"] == 0


async def test_negative_quantity_rejected(client):
    payload = invoice_payload(items=[{"description": "Fee", "quantity": -1, "unitPrice": 10}])
    
    response = await client.post("/api/billing/invoices", json=payload)
    
    assert response.status_code == 400


async def test_update_recomputes_and_stamps_status(client):
    invoice = (await client.post("/api/billing/invoices", json=invoice_payload())).json()
    
    response = await client.put(
        f"/api/billing/invoices/{invoice['id']}",
        json={"taxRate": 0, "depositAmount": 0, "status": "issued"},
    )
    
    body = response.json()
    assert body["totalAmount"] == 271.5
    assert body["dueAmount"] == 271.5
    assert body["status"] == "issued"
    assert body["issuedDate"] is not None
    
    issued_date = body["issuedDate"]
    body = (await client.put(f"/api/billing/invoices/{invoice['id']}", json={"status": "paid"})).json()
    assert body["paidDate"] is not None
    assert body["issuedDate"] == issued_date


async def test_invoice_filters(client):
    created_client = (await client.post("/api/clients", json=client_payload())).json()
    await client.post("/api/billing/invoices", json=invoice_payload(clientId=created_client["id"]))
    await client.post("/api/billing/invoices", json=invoice_payload(status="issued"))
    
    by_status = (await client.get("/api/billing/invoices", params={"status": "issued"})).json()
    assert by_status["total"] == 1
    assert by_status["invoices"][0]["invoiceNumber"] == "INV-0002"
    
    by_client = (await client.get("/api/billing/invoices", params={"clientId": created_client["id"]})).json()
    assert by_client["total"] == 1
    assert by_client["invoices"][0]["clientId"] == created_client["id"]


async def test_invoice_unknown_client(client):
    response = await client.post(
        "/api/billing/invoices",
        json=invoice_payload(clientId="665f1c2e9b1d4a0012345678"),
    )
    
    assert response.status_code == 404


async def test_delete_invoice(client):
    invoice = (await client.post("/api/billing/invoices", json=invoice_payload())).json()
    
    response = await client.delete(f"/api/billing/invoices/{invoice['id']}")
    
    assert response.json() == {"message": "Invoice deleted successfully"}
    assert (await client.get(f"/api/billing/invoices/{invoice['id']}")).status_code == 404


async def test_payment_crud(client):
    response = await client.post(
        "/api/payment-billing/payments",
        json={"applicationId": "APP-1", "amount": 500, "commission": 50},
    )
    assert response.status_code == 201
    payment = response.json()
    assert payment["agent"] == "Unassigned"
    assert payment["status"] == "pending"
    
    updated = (await client.put(
        f"/api/payment-billing/payments/{payment['id']}",
        json={"status": "paid"},
    )).json()
    assert updated["status"] == "paid"
    assert updated["amount"] == 500
    
    listing = (await client.get("/api/payment-billing/payments", params={"status": "paid"})).json()
    assert listing["total"] == 1
    
    response = await client.delete(f"/api/payment-billing/payments/{payment['id']}")
    assert response.status_code == 200
    assert (await client.get(f"/api/payment-billing/payments/{payment['id']}")).status_code == 404


async def test_fee_structures(client):
    response = await client.post(
        "/api/payment-billing/fee-structures",
        json={"name": "UK Student Visa", "governmentFee": 490, "serviceFee": 200},
    )
    assert response.status_code == 201
    fee = response.json()
    assert fee["totalFee"] == 690
    
    await client.post(
        "/api/payment-billing/fee-structures",
        json={"name": "Retired Product", "governmentFee": 1, "serviceFee": 1, "isActive": False},
    )
    
    active = (await client.get("/api/payment-billing/fee-structures", params={"activeOnly": True})).json()
    assert [f["name"] for f in active["feeStructures"]] == ["UK Student Visa"]
    
    updated = (await client.put(
        f"/api/payment-billing/fee-structures/{fee['id']}",
        json={"serviceFee": 250},
    )).json()
    assert updated["totalFee"] == 740
