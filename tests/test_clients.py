"""Client CRUD, display ids, search and pagination."""

import asyncio
import re

from tests.factories import client_payload


async def create_client(client, **overrides) -> dict:
    response = await client.post("/api/clients", json=client_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_client_assigns_display_id(client):
    body = await create_client(client)
    
    assert body["clientId"] == "CLI-0001"
    assert body["firstName"] == "Amina"
    assert body["email"] == "amina@example.com"
    assert body["dateOfBirth"] == "1994-03-12"
    assert body["id"]
    
    second = await create_client(client, email="second@example.com")
    assert second["clientId"] == "CLI-0002"


async def test_create_client_missing_required_field(client):
    payload = client_payload()
    del payload["passportNumber"]
    
    response = await client.post("/api/clients", json=payload)
    
    assert response.status_code == 400
    assert "passportNumber" in response.json()["error"]


async def test_duplicate_email_is_rejected(client):
    await create_client(client, email="Amina@Example.com")
    
    response = await client.post("/api/clients", json=client_payload(email="amina@example.com"))
    
    assert response.status_code == 400
    assert "error" in response.json()
    listing = (await client.get("/api/clients")).json()
    assert listing["total"] == 1


async def test_update_client_merges_fields(client):
    created = await create_client(client)
    
    response = await client.put(
        f"/api/clients/{created['id']}",
        json={"city": "Dhaka", "emergencyContact": {"name": "Rafi", "phone": "123", "relationship": "Brother"}},
    )
    
    assert response.status_code == 200
    body = response.json()
    assert body["city"] == "Dhaka"
    assert body["firstName"] == "Amina"
    assert body["clientId"] == "CLI-0001"
    assert body["emergencyContact"]["name"] == "Rafi"


async def test_update_client_email_taken(client):
    await create_client(client)
    other = await create_client(client, email="other@example.com")
    
    response = await client.put(f"/api/clients/{other['id']}", json={"email": "amina@example.com"})
    
    assert response.status_code == 400


async def test_missing_client_is_404(client):
    existing = await create_client(client)
    
    for client_id in ("665f1c2e9b1d4a0012345678", "not-an-id"):
        assert (await client.get(f"/api/clients/{client_id}")).status_code == 404
        assert (await client.put(f"/api/clients/{client_id}", json={"city": "X"})).status_code == 404
        assert (await client.delete(f"/api/clients/{client_id}")).status_code == 404
    
    listing = (await client.get("/api/clients")).json()
    assert listing["total"] == 1
    assert listing["clients"][0]["city"] is None
    assert listing["clients"][0]["id"] == existing["id"]


async def test_delete_client(client):
    created = await create_client(client)
    
    response = await client.delete(f"/api/clients/{created['id']}")
    
    assert response.status_code == 200
    assert response.json() == {"message": "Client deleted successfully"}
    assert (await client.get(f"/api/clients/{created['id']}")).status_code == 404


async def test_list_search_is_case_insensitive_and_escaped(client):
    await create_client(client)
    await create_client(client, firstName="John", lastName="Smith", email="john@example.com")
    
    response = await client.get("/api/clients", params={"search": "AMINA"})
    body = response.json()
    assert body["total"] == 1
    assert body["clients"][0]["firstName"] == "Amina"
    
    # Regex metacharacters are matched literally
    response = await client.get("/api/clients", params={"search": ".*"})
    assert response.json()["total"] == 0


async def test_pagination_concatenates_to_full_list(client):
    for i in range(7):
        await create_client(client, email=f"client{i}@example.com", firstName=f"Client{i}")
    
    full = (await client.get("/api/clients", params={"limit": 100})).json()
    assert full["total"] == 7
    
    pages = []
    for page in (1, 2, 3):
        body = (await client.get("/api/clients", params={"page": page, "limit": 3})).json()
        assert body["totalPages"] == 3
        pages.extend(body["clients"])
    
    assert [c["id"] for c in pages] == [c["id"] for c in full["clients"]]
    
    # Same request twice gives the same page
    again = (await client.get("/api/clients", params={"page": 2, "limit": 3})).json()
    assert [c["id"] for c in again["clients"]] == [c["id"] for c in pages[3:6]]


async def test_limit_is_clamped(client):
    await create_client(client)
    
    body = (await client.get("/api/clients", params={"limit": 10000})).json()
    
    assert body["limit"] == 100


async def test_quick_search(client):
    await create_client(client)
    await create_client(client, firstName="John", lastName="Smith", email="john@example.com")
    
    response = await client.get("/api/clients/search", params={"q": "smith"})
    
    assert response.status_code == 200
    assert [c["lastName"] for c in response.json()] == ["Smith"]
    
    assert (await client.get("/api/clients/search")).status_code == 400
    assert (await client.get("/api/clients/search", params={"q": "  "})).status_code == 400


async def test_create_client_minimal_record(client):
    response = await client.post(
        "/api/clients",
        json={
            "firstName": "Jane",
            "lastName": "Doe",
            "email": "jane@x.com",
            "phone": "555-0100",
            "dateOfBirth": "1990-01-01",
            "gender": "female",
            "passportNumber": "P1",
            "passportCountry": "US",
            "visaType": "tourist",
            "visaApplicationDate": "2024-01-01",
        },
    )
    
    assert response.status_code == 201
    assert re.fullmatch(r"CLI-\d{4}", response.json()["clientId"])


async def test_search_results_contain_term(client):
    await create_client(client)
    await create_client(client, firstName="Jamal", lastName="Ahmed", email="jamal@example.com")
    await create_client(client, firstName="Lena", lastName="Ortiz", email="lena@example.com")
    
    body = (await client.get("/api/clients", params={"search": "AHM"})).json()
    
    assert body["total"] == 2
    for record in body["clients"]:
        fields = (record["firstName"], record["lastName"], record["email"], record["clientId"])
        assert any("ahm" in value.lower() for value in fields)


async def test_concurrent_creates_get_distinct_display_ids(client):
    responses = await asyncio.gather(*[
        client.post("/api/clients", json=client_payload(email=f"client{n}@example.com"))
        for n in range(10)
    ])
    
    assert all(response.status_code == 201 for response in responses)
    client_ids = sorted(response.json()["clientId"] for response in responses)
    assert client_ids == [f"CLI-{n:04d}" for n in range(1, 11)]
