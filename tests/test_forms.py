"""Application form templates."""

import pytest


def form_payload(**overrides) -> dict:
    payload = {
        "templateId": "UK-STUDENT-2024",
        "name": "UK Student Visa Application",
        "country": "United Kingdom",
        "category": "Student",
        "fields": [
            {"id": "f1", "name": "fullName", "type": "text", "label": "Full name", "required": True},
            {
                "id": "f2",
                "name": "course",
                "type": "select",
                "label": "Course level",
                "options": ["Undergraduate", "Postgraduate"],
            },
        ],
    }
    payload.update(overrides)
    return payload


async def create_form(client, **overrides) -> dict:
    response = await client.post("/api/forms", json=form_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_form_template_defaults(client):
    form = await create_form(client)
    
    assert form["version"] == "2024"
    assert form["status"] == "draft"
    assert form["description"] == ""
    assert [f["name"] for f in form["fields"]] == ["fullName", "course"]
    assert form["fields"][0]["required"] is True
    assert form["fields"][1]["required"] is False
    assert form["fields"][1]["options"] == ["Undergraduate", "Postgraduate"]
    
    fetched = (await client.get(f"/api/forms/{form['id']}")).json()
    assert fetched["templateId"] == "UK-STUDENT-2024"
    assert fetched["fields"] == form["fields"]


@pytest.mark.parametrize("field", ["templateId", "name", "country", "category"])
async def test_form_template_required_fields(client, field):
    response = await client.post("/api/forms", json=form_payload(**{field: "  "}))
    
    assert response.status_code == 400
    assert field in response.json()["error"]


async def test_template_id_is_unique(client):
    first = await create_form(client)
    other = await create_form(client, templateId="CA-WORK-2024", name="Canada Work Permit", country="Canada")
    
    duplicate = await client.post("/api/forms", json=form_payload(name="Copy"))
    assert duplicate.status_code == 400
    assert duplicate.json() == {"error": "Template ID already exists"}
    
    clash = await client.put(f"/api/forms/{other['id']}", json={"templateId": first["templateId"]})
    assert clash.status_code == 400
    
    # Re-sending its own id is not a clash
    same = await client.put(f"/api/forms/{first['id']}", json={"templateId": first["templateId"], "status": "active"})
    assert same.status_code == 200
    assert same.json()["status"] == "active"


async def test_duplicate_field_names_rejected(client):
    fields = form_payload()["fields"]
    fields[1]["name"] = "fullName"
    
    response = await client.post("/api/forms", json=form_payload(fields=fields))
    
    assert response.status_code == 400
    assert "unique" in response.json()["error"]


async def test_update_merges_and_replaces_fields(client):
    form = await create_form(client)
    
    response = await client.put(
        f"/api/forms/{form['id']}",
        json={"version": "2025", "fields": [{"id": "f9", "name": "passport", "type": "text", "label": "Passport"}]},
    )
    
    assert response.status_code == 200
    body = response.json()
    assert body["version"] == "2025"
    assert body["name"] == "UK Student Visa Application"
    assert [f["name"] for f in body["fields"]] == ["passport"]
    
    rejected = await client.put(f"/api/forms/{form['id']}", json={"country": None})
    assert rejected.status_code == 400


async def test_list_filters(client):
    await create_form(client)
    await create_form(client, templateId="CA-WORK-2024", name="Canada Work Permit", country="Canada", category="Work", status="active")
    
    by_country = (await client.get("/api/forms", params={"country": "canada"})).json()
    assert [t["templateId"] for t in by_country["templates"]] == ["CA-WORK-2024"]
    
    by_status = (await client.get("/api/forms", params={"status": "draft"})).json()
    assert [t["templateId"] for t in by_status["templates"]] == ["UK-STUDENT-2024"]
    
    by_search = (await client.get("/api/forms", params={"search": "student"})).json()
    assert by_search["total"] == 1
    
    everything = (await client.get("/api/forms")).json()
    assert [t["templateId"] for t in everything["templates"]] == ["CA-WORK-2024", "UK-STUDENT-2024"]


async def test_delete_form_template(client):
    form = await create_form(client)
    
    response = await client.delete(f"/api/forms/{form['id']}")
    
    assert response.json() == {"message": "Form template deleted successfully"}
    assert (await client.get(f"/api/forms/{form['id']}")).status_code == 404
    assert (await client.delete(f"/api/forms/{form['id']}")).status_code == 404
