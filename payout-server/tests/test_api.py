"""HTTP contract: success and error shapes of the ledger endpoints."""

from __future__ import annotations

from app.db import models


async def test_task_completion_scenario(client, seed, read):
    user_id = await seed.user(balance_cents=10000)
    task_id = await seed.task(user_id, cost_cents=2500)

    res = await client.post("/api/task/status", json={"task_id": task_id, "status": "completed"})
    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert await read.balance(user_id) == 12500

    res = await client.post("/api/task/status", json={"task_id": task_id, "status": "completed"})
    assert res.status_code == 200
    assert res.json() == {"message": "Task already completed"}
    assert await read.balance(user_id) == 12500

    res = await client.get(f"/api/user/{user_id}")
    assert res.json()["account_balance"] == "125.00"


async def test_task_status_errors(client):
    res = await client.post("/api/task/status", json={"status": "completed"})
    assert res.status_code == 400
    assert res.json() == {"error": "Missing task_id or status"}

    res = await client.post("/api/task/status", json={"task_id": "missing", "status": "completed"})
    assert res.status_code == 404
    assert res.json() == {"error": "Task not found"}


async def test_invalid_json_body(client):
    res = await client.post(
        "/api/task/status",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid JSON input"}


async def test_checkout_scenarios(client, seed, read):
    user_id = await seed.user(balance_cents=5000)

    res = await client.post("/api/checkout_requests", json={"user_id": user_id, "amount": "60.00"})
    assert res.status_code == 400
    assert res.json() == {"error": "Insufficient balance"}
    assert await read.balance(user_id) == 5000

    res = await client.post("/api/checkout_requests", json={"user_id": user_id, "amount": 50})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    checkout_id = body["id"]
    assert await read.balance(user_id) == 0

    res = await client.post(f"/api/checkout_request/{checkout_id}/approve", json={"transaction_number": "TX1"})
    assert res.status_code == 200
    assert res.json() == {"success": True}

    res = await client.post(f"/api/checkout_request/{checkout_id}/approve", json={"transaction_number": "TX1"})
    assert res.status_code == 400
    assert res.json() == {"error": "Checkout already processed"}

    res = await client.get(f"/api/checkout_request/{checkout_id}")
    assert res.json()["status"] == "approved"
    assert res.json()["transfer_number"] == "TX1"
    assert res.json()["amount"] == "50.00"


async def test_checkout_request_errors(client, seed):
    res = await client.post("/api/checkout_requests", json={"amount": "10"})
    assert res.status_code == 400
    assert res.json() == {"error": "Missing user_id or amount"}

    res = await client.post("/api/checkout_requests", json={"user_id": "ghost", "amount": "10"})
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}

    user_id = await seed.user(balance_cents=5000)
    res = await client.post("/api/checkout_requests", json={"user_id": user_id, "amount": "1.005"})
    assert res.status_code == 400


async def test_approve_without_transaction_number(client, seed):
    user_id = await seed.user(balance_cents=5000)
    res = await client.post("/api/checkout_requests", json={"user_id": user_id, "amount": "5"})
    checkout_id = res.json()["id"]

    res = await client.post(f"/api/checkout_request/{checkout_id}/approve", json={})
    assert res.status_code == 400
    assert res.json() == {"error": "Transaction number required"}

    res = await client.post(f"/api/checkout_request/{checkout_id}/approve")
    assert res.status_code == 400

    res = await client.post("/api/checkout_request/missing/approve", json={"transaction_number": "TX1"})
    assert res.status_code == 404
    assert res.json() == {"error": "Checkout request not found"}


async def test_reject_flow(client, seed, read):
    user_id = await seed.user(balance_cents=5000)
    res = await client.post("/api/checkout_requests", json={"user_id": user_id, "amount": "20"})
    checkout_id = res.json()["id"]

    res = await client.post(f"/api/checkout_request/{checkout_id}/reject")
    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert await read.balance(user_id) == 3000

    res = await client.post(f"/api/checkout_request/{checkout_id}/reject")
    assert res.status_code == 400
    assert res.json() == {"error": "Checkout already processed"}

    res = await client.post("/api/checkout_request/missing/reject")
    assert res.status_code == 404


async def test_reject_refund_when_configured(client, seed, read, refund_on_reject):
    user_id = await seed.user(balance_cents=5000)
    res = await client.post("/api/checkout_requests", json={"user_id": user_id, "amount": "20"})

    await client.post(f"/api/checkout_request/{res.json()['id']}/reject")

    assert await read.balance(user_id) == 5000


async def test_first_user_is_manager(client):
    res = await client.post("/api/users", json={"full_name": "Ada", "email": "ada@example.com"})
    assert res.status_code == 200
    assert res.json()["role"] == "manager"

    res = await client.post("/api/users", json={"full_name": "Bob", "email": "bob@example.com"})
    assert res.json()["role"] == "employee"

    res = await client.post("/api/users", json={"full_name": "Bob", "email": "BOB@example.com"})
    assert res.status_code == 400
    assert res.json() == {"error": "Email already exists"}

    res = await client.get("/api/users")
    assert sorted(user["email"] for user in res.json()) == ["ada@example.com", "bob@example.com"]


async def test_create_task_and_listings(client, seed):
    user_id = await seed.user(balance_cents=0)
    payload = {
        "title": "Stock count",
        "category": "warehouse",
        "deadline_date": "2026-11-01",
        "deadline_time": "17:00",
        "priority": "medium",
        "status": "pending",
        "cost": "12.50",
        "assigned_to": user_id,
    }
    res = await client.post("/api/tasks", json=payload)
    assert res.status_code == 200
    task_id = res.json()["id"]

    res = await client.get(f"/api/user/{user_id}/tasks")
    assert [(t["id"], t["cost"], t["note"]) for t in res.json()] == [(task_id, "12.50", "")]

    await client.post("/api/task/status", json={"task_id": task_id, "status": "completed"})
    await client.post("/api/checkout_requests", json={"user_id": user_id, "amount": "2.50"})

    res = await client.get(f"/api/user/{user_id}/withdrawals")
    assert [(w["amount"], w["status"]) for w in res.json()] == [("2.50", "pending")]

    res = await client.get(f"/api/user/{user_id}/ledger")
    body = res.json()
    assert body["balance"] == "10.00"
    assert sorted((e["type"], e["amount"]) for e in body["entries"]) == [("credit", "12.50"), ("reserve", "-2.50")]


async def test_create_task_validation(client, seed):
    res = await client.post("/api/tasks", json={"title": "Incomplete"})
    assert res.status_code == 400
    assert res.json()["error"].startswith("Missing required fields")

    res = await client.post(
        "/api/tasks",
        json={
            "title": "Orphan",
            "category": "x",
            "deadline_date": "2026-11-01",
            "deadline_time": "17:00",
            "priority": "low",
            "status": "pending",
            "cost": "1",
            "assigned_to": "ghost",
        },
    )
    assert res.status_code == 404


async def test_unknown_user_listings(client):
    for suffix in ("", "/tasks", "/withdrawals", "/ledger"):
        res = await client.get(f"/api/user/ghost{suffix}")
        assert res.status_code == 404
        assert res.json() == {"error": "User not found"}


async def test_health(client, read):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"

    res = await client.get("/api/health/ready")
    assert res.json() == {"status": "ready"}
    assert await read.count(models.User) == 0


async def test_oversized_amounts_are_rejected(client, seed, read):
    user_id = await seed.user(balance_cents=5000)

    for amount in ("1e30", "100000000000000000"):
        res = await client.post("/api/checkout_requests", json={"user_id": user_id, "amount": amount})
        assert res.status_code == 400
        assert "amount" in res.json()["error"]

    res = await client.post(
        "/api/tasks",
        json={
            "title": "Huge",
            "category": "x",
            "deadline_date": "2026-11-01",
            "deadline_time": "17:00",
            "priority": "low",
            "status": "pending",
            "cost": "1e30",
            "assigned_to": user_id,
        },
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid cost"}
    assert await read.balance(user_id) == 5000
