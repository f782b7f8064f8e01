"""System settings and the signed-in user's profile."""

from httpx import ASGITransport, AsyncClient

from tests.conftest import ADMIN_PASSWORD, session_headers
from visapilot.core.security import verify_password
from visapilot.features.auth.models import User
from visapilot.main import app


async def test_settings_created_with_defaults(client):
    body = (await client.get("/api/settings")).json()
    
    assert body["systemTitle"] == "VisaPilot - Visa & Travel Agency / Student Consultancy"
    assert body["currency"] == "USD"
    assert body["timeFormat"] == "12h"
    assert body["workingHours"] == {
        "start": "09:00",
        "end": "17:00",
        "days": ["monday", "tuesday", "wednesday", "thursday", "friday"],
    }
    assert body["security"]["sessionTimeout"] == 480
    
    again = (await client.get("/api/settings")).json()
    assert again["id"] == body["id"]


async def test_update_settings_merges_nested_objects(client):
    response = await client.put(
        "/api/settings",
        json={"currency": "EUR", "workingHours": {"end": "18:00"}, "privacy": {"allowDataExport": False}},
    )
    
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Settings updated successfully"
    settings = body["settings"]
    assert settings["currency"] == "EUR"
    assert settings["workingHours"]["start"] == "09:00"
    assert settings["workingHours"]["end"] == "18:00"
    assert settings["privacy"]["allowDataExport"] is False
    assert settings["privacy"]["dataRetentionDays"] == 2555
    
    stored = (await client.get("/api/settings")).json()
    assert stored["workingHours"]["end"] == "18:00"
    assert stored["currency"] == "EUR"


async def test_update_settings_validates_values(client):
    response = await client.put("/api/settings", json={"workingHours": {"start": "9am"}})
    
    assert response.status_code == 400


async def test_update_settings_requires_admin(database):
    staff = User(email="staff@example.com", name="Front Desk", role="staff")
    await staff.insert()
    
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=session_headers(staff),
    ) as session:
        assert (await session.get("/api/settings")).status_code == 200
        response = await session.put("/api/settings", json={"currency": "GBP"})
    
    assert response.status_code == 403


async def test_public_settings_without_session(anon_client):
    response = await anon_client.get("/api/public-settings")
    
    assert response.status_code == 200
    assert response.json() == {
        "systemTitle": "VisaPilot - Visa & Travel Agency / Student Consultancy",
        "systemDescription": "Operations & CRM Platform",
    }


async def test_get_profile(client, admin_user):
    body = (await client.get("/api/profile")).json()
    
    assert body["id"] == str(admin_user.id)
    assert body["email"] == admin_user.email
    assert "passwordHash" not in body


async def test_update_profile(client):
    response = await client.put(
        "/api/profile",
        json={"name": "  Head Admin ", "email": "Head@Example.com", "phone": "555-0199"},
    )
    
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Profile updated successfully"
    assert body["user"]["name"] == "Head Admin"
    assert body["user"]["email"] == "head@example.com"
    assert body["user"]["phone"] == "555-0199"


async def test_update_profile_requires_name_and_email(client):
    response = await client.put("/api/profile", json={"name": "Head Admin"})
    
    assert response.status_code == 400
    assert response.json() == {"error": "Name and email are required"}


async def test_update_profile_email_taken(client):
    await User(email="taken@example.com", name="Someone").insert()
    
    response = await client.put("/api/profile", json={"name": "Admin", "email": "taken@example.com"})
    
    assert response.status_code == 400
    assert response.json() == {"error": "Email is already taken"}


async def test_change_password(client, admin_user):
    response = await client.put(
        "/api/profile/password",
        json={"currentPassword": ADMIN_PASSWORD, "newPassword": "new-secret"},
    )
    
    assert response.status_code == 200
    assert response.json() == {"message": "Password updated successfully"}
    await admin_user.sync()
    assert verify_password("new-secret", admin_user.password_hash)


async def test_change_password_rejections(client):
    cases = [
        ({"currentPassword": ADMIN_PASSWORD}, "Current password and new password are required"),
        ({"currentPassword": ADMIN_PASSWORD, "newPassword": "short"}, "Password must be at least 6 characters long"),
        ({"currentPassword": "wrong", "newPassword": "new-secret"}, "Current password is incorrect"),
    ]
    for payload, message in cases:
        response = await client.put("/api/profile/password", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": message}


async def test_change_password_without_existing_password(database):
    user = User(email="otp-only@example.com", name="OTP Only")
    await user.insert()
    
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=session_headers(user),
    ) as session:
        response = await session.put(
            "/api/profile/password",
            json={"currentPassword": "anything", "newPassword": "new-secret"},
        )
    
    assert response.status_code == 400
