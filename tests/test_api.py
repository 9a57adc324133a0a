"""
Tests for the HTTP surface: routing, camelCase payloads, status codes and
the deal-closing / reporting flows end to end.
"""

from uuid import uuid4

from tests.factories import add_agent, add_config, add_customer, add_product, at


async def test_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.json()["message"]


# ===================================================================
# Customers
# ===================================================================

async def test_closing_a_customer_over_http(client):
    agent = (await client.post("/api/v1/agents", json={"name": "Alice", "email": "alice@ridgepark.com"})).json()
    product = (await client.post("/api/v1/products", json={"title": "Loft", "price": 250000})).json()
    customer = (await client.post("/api/v1/customers", json={"name": "Carl", "agentId": agent["id"]})).json()
    assert customer["status"] == "Lead"

    resp = await client.put(
        f"/api/v1/customers/{customer['id']}",
        json={"status": "Closed", "propertyId": product["id"], "budget": 260000},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == customer["id"]
    assert body["status"] == "Closed"
    assert body["propertyId"] == product["id"]
    assert body["budget"] == 260000

    agents = (await client.get("/api/v1/agents")).json()
    assert agents[0]["points"] == 10
    assert agents[0]["salesCount"] == 1

    products = (await client.get("/api/v1/products")).json()
    assert products[0]["quantity"] == 0
    assert products[0]["status"] == "Sold"

    # Saving again changes nothing on the agent
    await client.put(f"/api/v1/customers/{customer['id']}", json={"status": "Closed"})
    agents = (await client.get("/api/v1/agents")).json()
    assert agents[0]["points"] == 10


async def test_update_unknown_customer_is_404(client):
    resp = await client.put(f"/api/v1/customers/{uuid4()}", json={"status": "Closed"})
    assert resp.status_code == 404


async def test_customer_list_window(client, db):
    await add_customer(db, name="old", created_at=at(2023, 5, 1))
    await add_customer(db, name="january", created_at=at(2024, 1, 15))
    await add_customer(db, name="march", created_at=at(2024, 3, 1))

    ranged = await client.get("/api/v1/customers", params={"startDate": "2024-01-01", "endDate": "2024-01-31"})
    existing = await client.get("/api/v1/customers", params={"endDate": "2024-01-31"})
    everyone = await client.get("/api/v1/customers")

    assert [c["name"] for c in ranged.json()] == ["january"]
    assert sorted(c["name"] for c in existing.json()) == ["january", "old"]
    assert len(everyone.json()) == 3


async def test_delete_customer(client, db):
    customer = await add_customer(db)
    resp = await client.delete(f"/api/v1/customers/{customer.customer_id}")
    assert resp.json() == {"success": True}
    assert (await client.delete(f"/api/v1/customers/{customer.customer_id}")).status_code == 404


# ===================================================================
# Agents
# ===================================================================

async def test_agent_defaults_and_targets(client):
    agent = (await client.post("/api/v1/agents", json={"name": "Bo"})).json()
    assert agent["commissionRate"] == 100
    assert agent["active"] is True
    assert agent["targets"] == []

    url = f"/api/v1/agents/{agent['id']}/target"
    await client.put(url, json={"startDate": "2024-01-01", "endDate": "2024-03-31", "target": 5})
    await client.put(url, json={"startDate": "2024-04-01", "endDate": "2024-06-30", "target": 7})
    resp = await client.put(url, json={"startDate": "2024-01-01", "endDate": "2024-03-31", "target": 9})

    assert resp.json()["targets"] == [
        {"startDate": "2024-01-01", "endDate": "2024-03-31", "target": 9},
        {"startDate": "2024-04-01", "endDate": "2024-06-30", "target": 7},
    ]


async def test_agent_target_for_unknown_agent_is_404(client):
    resp = await client.put(
        f"/api/v1/agents/{uuid4()}/target",
        json={"startDate": "2024-01-01", "endDate": "2024-03-31", "target": 5},
    )
    assert resp.status_code == 404


async def test_agent_update_and_existence_filter(client, db):
    await add_agent(db, name="Old", created_at=at(2023, 1, 1))
    new = await add_agent(db, name="New", created_at=at(2024, 6, 1))

    resp = await client.put(f"/api/v1/agents/{new.agent_id}", json={"commissionRate": 75, "active": False})
    assert resp.json()["commissionRate"] == 75
    assert resp.json()["active"] is False

    listed = await client.get("/api/v1/agents", params={"endDate": "2024-01-01"})
    assert [a["name"] for a in listed.json()] == ["Old"]


# ===================================================================
# Products
# ===================================================================

async def test_product_images_are_uploaded_on_create(client):
    resp = await client.post("/api/v1/products", json={
        "title": "Townhouse",
        "price": 400000,
        "images": ["https://cdn.test/front.png", "data:image/png;base64,broken"],
    })
    assert resp.status_code == 201
    assert resp.json()["images"] == ["https://cdn.test/front.png", None]


async def test_product_quantity_drives_status(client, db):
    product = await add_product(db, quantity=1)
    url = f"/api/v1/products/{product.product_id}"

    sold = await client.put(url, json={"quantity": 0, "status": "Available"})
    assert sold.json()["status"] == "Sold"

    restocked = await client.put(url, json={"quantity": 3, "status": "Sold"})
    assert restocked.json()["status"] == "Available"

    reserved = await client.put(url, json={"quantity": 2, "status": "Reserved"})
    assert reserved.json()["status"] == "Reserved"


async def test_product_update_drops_failed_images(client, db):
    product = await add_product(db)
    resp = await client.put(
        f"/api/v1/products/{product.product_id}",
        json={"images": ["data:image/png;base64,broken", "https://cdn.test/kept.png"]},
    )
    assert resp.json()["images"] == ["https://cdn.test/kept.png"]


async def test_negative_quantity_is_rejected(client, db):
    product = await add_product(db)
    resp = await client.put(f"/api/v1/products/{product.product_id}", json={"quantity": -1})
    assert resp.status_code == 422


# ===================================================================
# Financials
# ===================================================================

async def test_config_is_created_on_first_read(client):
    resp = await client.get("/api/v1/financials/config")
    assert resp.status_code == 200
    assert resp.json() == {
        "interestIncome": 0, "otherIncome": 0, "rent": 0, "utilities": 0, "supplies": 0,
        "marketing": 0, "insurance": 0, "maintenance": 0, "misc": 0, "baseSalaries": 0,
        "depreciation": 0, "taxes": 0,
    }

    updated = await client.put("/api/v1/financials/config", json={"rent": 1200, "unknownField": 5})
    assert updated.json()["rent"] == 1200

    again = await client.get("/api/v1/financials/config")
    assert again.json()["rent"] == 1200


async def test_config_before_the_first_agent_is_zero(client, db):
    await add_config(db, rent=999)
    await add_agent(db, created_at=at(2024, 3, 1))

    resp = await client.get("/api/v1/financials/config", params={"endDate": "2024-01-01"})
    assert resp.json()["rent"] == 0

    resp = await client.get("/api/v1/financials/config", params={"endDate": "2024-03-02"})
    assert resp.json()["rent"] == 999


async def test_report_shape(client, db):
    await add_config(db, rent=1000, base_salaries=2000)
    agent = await add_agent(db, name="Alice", created_at=at(2023, 12, 1))
    product = await add_product(db, title="Palm Villa", price=500000, vat_tax=5000, other_cost=2000)
    await add_customer(db, status="Closed", agent_id=agent.agent_id, property_id=product.product_id,
                       updated_at=at(2024, 1, 15))

    resp = await client.get("/api/v1/financials/report", params={"startDate": "2024-01-01", "endDate": "2024-01-31"})

    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"income", "expenses", "netProfitLoss"}
    assert body["income"]["salesRevenue"] == 500000
    assert body["income"]["details"]["soldProducts"][0]["title"] == "Palm Villa"
    assert body["expenses"]["salariesWages"] == 2100
    assert body["expenses"]["propertyTransactionCosts"] == 7000
    assert body["expenses"]["details"]["commissions"] == [{"agentName": "Alice", "amount": 100, "points": 10}]
    assert body["expenses"]["details"]["propertyCosts"][0]["breakdown"] == "VAT: 5000, Other: 2000"
    assert body["netProfitLoss"] == 504900


async def test_pre_system_report_is_all_zero(client, db):
    await add_config(db, rent=1000)
    await add_agent(db, created_at=at(2024, 3, 1))

    resp = await client.get("/api/v1/financials/report", params={"startDate": "2023-01-01", "endDate": "2023-12-31"})

    body = resp.json()
    assert body["netProfitLoss"] == 0
    assert body["income"]["totalIncome"] == 0
    assert body["expenses"]["totalExpenses"] == 0
    assert body["expenses"]["rent"] == 0
    assert body["income"]["details"]["soldProducts"] == []
    assert body["expenses"]["details"]["commissions"] == []


async def test_bad_date_is_rejected(client):
    resp = await client.get("/api/v1/financials/report", params={"endDate": "not-a-date"})
    assert resp.status_code == 422


# ===================================================================
# Stats
# ===================================================================

async def test_stats(client, db):
    await add_agent(db, created_at=at(2023, 1, 1))
    await add_agent(db, created_at=at(2024, 6, 1))
    listed = await add_product(db, price=300, quantity=1, created_at=at(2023, 2, 1))
    await add_product(db, price=700, quantity=0, status="Sold", created_at=at(2023, 2, 1))
    await add_product(db, price=50, quantity=0, status="Available", created_at=at(2023, 3, 1))
    await add_product(db, price=10, created_at=at(2024, 7, 1))
    await add_customer(db, created_at=at(2024, 1, 5))
    await add_customer(db, status="Closed", property_id=listed.product_id,
                       created_at=at(2023, 12, 1), updated_at=at(2024, 1, 20))
    await add_customer(db, status="Closed", property_id=uuid4(), created_at=at(2024, 1, 2), updated_at=at(2024, 1, 21))

    resp = await client.get("/api/v1/stats", params={"startDate": "2024-01-01", "endDate": "2024-01-31"})

    assert resp.json() == {
        "totalSales": 300,
        "activeListings": 2,
        "totalCustomers": 2,
        "totalAgents": 1,
    }
