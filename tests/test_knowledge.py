"""Knowledge-help collections behind one endpoint."""

from datetime import datetime


VISA_ENTRY = {
    "country": "Canada",
    "visaType": "Study Permit",
    "requirements": ["Letter of acceptance", "Proof of funds"],
    "processingTime": "8-12 weeks",
    "fees": "CAD 150",
    "difficulty": "Medium",
    "tips": "Show ties to home country",
}

GUIDELINE = {
    "title": "Interview preparation basics",
    "category": "Training",
    "duration": "45 min",
    "level": "Beginner",
}


async def test_grouped_listing_when_no_type(client):
    await client.post("/api/knowledge-help", json={"type": "visa-knowledge", "entry": VISA_ENTRY})
    
    body = (await client.get("/api/knowledge-help")).json()
    
    assert set(body) == {"visaKnowledge", "sopDocs", "learningGuidelines", "rejectionTips"}
    assert len(body["visaKnowledge"]) == 1
    assert body["sopDocs"] == []


async def test_unknown_type_is_rejected(client):
    assert (await client.get("/api/knowledge-help", params={"type": "recipes"})).status_code == 400
    response = await client.post("/api/knowledge-help", json={"type": "recipes", "entry": {}})
    assert response.status_code == 400


async def test_create_and_list_by_type(client):
    response = await client.post("/api/knowledge-help", json={"type": "visa-knowledge", "entry": VISA_ENTRY})
    
    assert response.status_code == 201
    created = response.json()
    assert created["visaType"] == "Study Permit"
    assert created["lastUpdated"]
    
    listing = (await client.get("/api/knowledge-help", params={"type": "visa-knowledge"})).json()
    assert [e["id"] for e in listing] == [created["id"]]


async def test_create_validates_entry(client):
    entry = dict(VISA_ENTRY, difficulty="Impossible")
    
    response = await client.post("/api/knowledge-help", json={"type": "visa-knowledge", "entry": entry})
    
    assert response.status_code == 400
    assert "difficulty" in response.json()["error"]


async def test_legacy_payload_keys(client):
    response = await client.post("/api/knowledge-help", json={"type": "learning-guidelines", "guideline": GUIDELINE})
    
    assert response.status_code == 201
    body = response.json()
    assert body["completed"] is False
    assert body["enrolled"] == 0


async def test_update_stamps_last_updated(client):
    created = (await client.post("/api/knowledge-help", json={"type": "visa-knowledge", "entry": VISA_ENTRY})).json()
    
    response = await client.put(
        "/api/knowledge-help",
        json={"type": "visa-knowledge", "id": created["id"], "entry": {"fees": "CAD 160"}},
    )
    
    assert response.status_code == 200
    body = response.json()
    assert body["fees"] == "CAD 160"
    assert body["country"] == "Canada"
    assert datetime.fromisoformat(body["lastUpdated"]) >= datetime.fromisoformat(created["lastUpdated"])


async def test_update_and_delete_missing_entry(client):
    missing = "665f1c2e9b1d4a0012345678"
    
    response = await client.put(
        "/api/knowledge-help",
        json={"type": "rejection-tips", "id": missing, "entry": {"title": "x"}},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Tip not found"}
    
    response = await client.delete("/api/knowledge-help", params={"type": "sop-docs", "id": missing})
    assert response.status_code == 404
    assert response.json() == {"error": "Document not found"}


async def test_delete_entry(client):
    created = (await client.post("/api/knowledge-help", json={"type": "learning-guidelines", "entry": GUIDELINE})).json()
    
    response = await client.delete("/api/knowledge-help", params={"type": "learning-guidelines", "id": created["id"]})
    
    assert response.json() == {"message": "Guideline deleted"}
    assert (await client.get("/api/knowledge-help", params={"type": "learning-guidelines"})).json() == []
