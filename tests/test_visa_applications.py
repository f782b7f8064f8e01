"""Visa application tracking."""


async def test_visa_application_crud(client):
    response = await client.post(
        "/api/visa-applications",
        json={"applicantName": "Amina Rahman", "visaType": "Student"},
    )
    assert response.status_code == 201
    application = response.json()
    assert application["status"] == "draft"
    assert application["agent"] == "Unassigned"
    
    updated = (await client.put(
        f"/api/visa-applications/{application['id']}",
        json={"status": "submitted", "agent": "Sarah Lee"},
    )).json()
    assert updated["status"] == "submitted"
    assert updated["applicantName"] == "Amina Rahman"
    
    listing = (await client.get("/api/visa-applications", params={"search": "sarah"})).json()
    assert listing["total"] == 1
    assert listing["visaApplications"][0]["id"] == application["id"]
    
    response = await client.delete(f"/api/visa-applications/{application['id']}")
    assert response.json() == {"message": "Visa application deleted successfully"}


async def test_visa_application_invalid_status(client):
    response = await client.post(
        "/api/visa-applications",
        json={"applicantName": "Amina Rahman", "visaType": "Student", "status": "lost"},
    )
    
    assert response.status_code == 400
