"""Ledger summary, transactions and commissions."""

import pytest

from visapilot.features.accounting.service import profit_margin


def transaction(**overrides) -> dict:
    payload = {
        "description": "Visa processing fee",
        "amount": 1000,
        "type": "revenue",
        "category": "Processing",
        "date": "2024-06-01",
    }
    payload.update(overrides)
    return payload


def test_profit_margin():
    assert profit_margin(0, 0) == 0
    assert profit_margin(250, 1000) == 25.0
    assert profit_margin(1, 3) == 33.33
    assert profit_margin(-500, 1000) == -50.0


async def test_empty_summary(client):
    body = (await client.get("/api/accounting")).json()
    
    assert body == {
        "totalRevenue": 0,
        "totalExpenses": 0,
        "netProfit": 0,
        "profitMargin": 0,
        "totalCommissionEarned": 0,
        "transactions": [],
    }


async def test_summary_aggregates(client):
    await client.post("/api/accounting/transactions", json=transaction(amount=1000))
    await client.post("/api/accounting/transactions", json=transaction(amount=500, date="2024-06-03"))
    await client.post(
        "/api/accounting/transactions",
        json=transaction(amount=300, type="expense", category="Rent", date="2024-06-02"),
    )
    await client.post(
        "/api/accounting/commissions",
        json={"agentId": "a1", "agentName": "Sarah Lee", "period": "June 2024", "commissionRate": 10, "totalAmount": 1500},
    )
    
    body = (await client.get("/api/accounting")).json()
    
    assert body["totalRevenue"] == 1500
    assert body["totalExpenses"] == 300
    assert body["netProfit"] == 1200
    assert body["profitMargin"] == 80.0
    assert body["totalCommissionEarned"] == 150
    assert [t["date"] for t in body["transactions"]] == ["2024-06-03", "2024-06-02", "2024-06-01"]


async def test_summary_keeps_ten_most_recent(client):
    for day in range(1, 13):
        await client.post("/api/accounting/transactions", json=transaction(date=f"2024-06-{day:02d}"))
    
    body = (await client.get("/api/accounting")).json()
    
    assert len(body["transactions"]) == 10
    assert body["transactions"][0]["date"] == "2024-06-12"


async def test_transactions_filter_by_type(client, admin_user):
    await client.post("/api/accounting/transactions", json=transaction())
    await client.post("/api/accounting/transactions", json=transaction(type="expense", category="Rent"))
    
    body = (await client.get("/api/accounting/transactions", params={"type": "expense"})).json()
    
    assert body["total"] == 1
    assert body["transactions"][0]["category"] == "Rent"
    assert body["transactions"][0]["clientName"] == "Unknown Client"
    assert body["transactions"][0]["userId"] == str(admin_user.id)


async def test_transaction_invalid_type(client):
    response = await client.post("/api/accounting/transactions", json=transaction(type="refund"))
    
    assert response.status_code == 400


async def test_commission_defaults_earned_amount(client):
    response = await client.post(
        "/api/accounting/commissions",
        json={"agentId": "a1", "agentName": "Sarah Lee", "period": "June 2024", "commissionRate": 12.5, "totalAmount": 2000},
    )
    
    assert response.status_code == 201
    body = response.json()
    assert body["commissionEarned"] == 250
    assert body["status"] == "pending"
    
    explicit = (await client.post(
        "/api/accounting/commissions",
        json={"agentId": "a1", "agentName": "Sarah Lee", "period": "July 2024", "commissionRate": 10, "totalAmount": 2000, "commissionEarned": 75},
    )).json()
    assert explicit["commissionEarned"] == 75
    
    listing = (await client.get("/api/accounting/commissions")).json()
    assert [c["period"] for c in listing] == ["July 2024", "June 2024"]


@pytest.mark.parametrize("rate", [-1, 100.5])
async def test_commission_rate_out_of_range(client, rate):
    response = await client.post(
        "/api/accounting/commissions",
        json={"agentId": "a1", "agentName": "Sarah Lee", "period": "June 2024", "commissionRate": rate},
    )
    
    assert response.status_code == 400
    assert response.json() == {"error": "Commission rate must be between 0 and 100"}


async def test_commission_missing_fields(client):
    response = await client.post("/api/accounting/commissions", json={"agentId": "a1", "commissionRate": 5})
    
    assert response.status_code == 400
