"""Checkout workflow: reservation on creation and single resolution."""

from __future__ import annotations

import asyncio
import random
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from app.core.errors import AlreadyProcessedError, InsufficientBalanceError, StorageError, ValidationError
from app.db import models
from app.modules.balances.service import BalanceService
from app.modules.checkouts import CheckoutAlreadyProcessedError, CheckoutNotFoundError
from app.modules.checkouts.service import CheckoutService
from app.modules.tasks.service import TaskService
from app.modules.users import UserNotFoundError


async def test_overdraw_is_rejected_without_mutation(db, seed, read):
    user_id = await seed.user(balance_cents=5000)

    with pytest.raises(InsufficientBalanceError):
        await CheckoutService.with_session(db).create_checkout_request(user_id, Decimal("60.00"))

    assert await read.balance(user_id) == 5000
    assert await read.count(models.CheckoutRequest) == 0
    assert await read.count(models.BalanceEntry) == 0


async def test_full_withdrawal_then_approval(db, seed, read):
    user_id = await seed.user(balance_cents=5000)
    service = CheckoutService.with_session(db)

    checkout = await service.create_checkout_request(user_id, Decimal("50.00"))
    assert checkout.status == "pending"
    assert checkout.amount_cents == 5000
    assert await read.balance(user_id) == 0

    approved = await service.approve_checkout_request(checkout.id, "TX1")
    assert approved.status == "approved"
    assert approved.transfer_number == "TX1"
    assert approved.processed_at is not None

    with pytest.raises(AlreadyProcessedError):
        await service.approve_checkout_request(checkout.id, "TX2")

    stored = await read.checkout(checkout.id)
    assert stored.status == "approved"
    assert stored.transfer_number == "TX1"
    assert await read.balance(user_id) == 0


async def test_overlapping_requests_cannot_exceed_balance(db, seed, read):
    user_id = await seed.user(balance_cents=10000)
    service = CheckoutService.with_session(db)

    await service.create_checkout_request(user_id, "60")
    with pytest.raises(InsufficientBalanceError):
        await service.create_checkout_request(user_id, "60")

    assert await read.balance(user_id) == 4000
    assert await read.count(models.CheckoutRequest) == 1


async def test_concurrent_requests_never_overdraw(session_factory, seed, read):
    user_id = await seed.user(balance_cents=10000)

    async def request():
        async with session_factory() as session:
            try:
                return await CheckoutService.with_session(session).create_checkout_request(user_id, "70")
            except InsufficientBalanceError:
                return None

    results = await asyncio.gather(request(), request())

    assert sum(r is not None for r in results) == 1
    assert await read.balance(user_id) == 3000


async def test_failed_insert_rolls_back_debit(db, seed, read, monkeypatch):
    user_id = await seed.user(balance_cents=5000)
    service = CheckoutService.with_session(db)

    async def broken_create(**kwargs):
        raise IntegrityError("INSERT INTO checkout_requests", {}, Exception("constraint failed"))

    monkeypatch.setattr(service.repository, "create", broken_create)

    with pytest.raises(StorageError):
        await service.create_checkout_request(user_id, "20.00")

    assert await read.balance(user_id) == 5000
    assert await read.count(models.CheckoutRequest) == 0


@pytest.mark.parametrize("amount", ["0", "-5", "10.001", "abc"])
async def test_invalid_amounts_are_rejected(db, seed, read, amount):
    user_id = await seed.user(balance_cents=5000)

    with pytest.raises(ValidationError):
        await CheckoutService.with_session(db).create_checkout_request(user_id, amount)

    assert await read.balance(user_id) == 5000


async def test_missing_fields_are_rejected(db):
    service = CheckoutService.with_session(db)
    with pytest.raises(ValidationError, match="Missing user_id or amount"):
        await service.create_checkout_request(None, "10")
    with pytest.raises(ValidationError, match="Missing user_id or amount"):
        await service.create_checkout_request("someone", None)


async def test_unknown_user_is_not_found(db):
    with pytest.raises(UserNotFoundError):
        await CheckoutService.with_session(db).create_checkout_request("ghost", "1.00")


async def test_approve_requires_transfer_number(db, seed, read):
    user_id = await seed.user(balance_cents=5000)
    service = CheckoutService.with_session(db)
    checkout = await service.create_checkout_request(user_id, "10")

    for blank in (None, "", "   "):
        with pytest.raises(ValidationError, match="Transaction number required"):
            await service.approve_checkout_request(checkout.id, blank)

    assert (await read.checkout(checkout.id)).status == "pending"


async def test_resolving_unknown_request_is_not_found(db):
    service = CheckoutService.with_session(db)
    with pytest.raises(CheckoutNotFoundError):
        await service.approve_checkout_request("missing", "TX1")
    with pytest.raises(CheckoutNotFoundError):
        await service.reject_checkout_request("missing")


async def test_reject_keeps_funds_reserved_by_default(db, seed, read):
    user_id = await seed.user(balance_cents=5000)
    service = CheckoutService.with_session(db)
    checkout = await service.create_checkout_request(user_id, "20")

    rejected = await service.reject_checkout_request(checkout.id)

    assert rejected.status == "rejected"
    assert rejected.transfer_number is None
    assert await read.balance(user_id) == 3000


async def test_reject_refunds_when_enabled(db, seed, read):
    user_id = await seed.user(balance_cents=5000)
    service = CheckoutService.with_session(db, refund_on_reject=True)
    checkout = await service.create_checkout_request(user_id, "20")

    await service.reject_checkout_request(checkout.id)

    assert await read.balance(user_id) == 5000
    entries = await BalanceService.with_session(db).list_entries(user_id)
    assert sorted(entry.type for entry in entries) == ["refund", "reserve"]


@pytest.mark.parametrize("first", ["approve", "reject"])
async def test_terminal_requests_never_transition(db, seed, read, first):
    user_id = await seed.user(balance_cents=5000)
    service = CheckoutService.with_session(db, refund_on_reject=True)
    checkout = await service.create_checkout_request(user_id, "20")

    if first == "approve":
        await service.approve_checkout_request(checkout.id, "TX1")
    else:
        await service.reject_checkout_request(checkout.id)
    balance_after_first = await read.balance(user_id)

    with pytest.raises(CheckoutAlreadyProcessedError):
        await service.approve_checkout_request(checkout.id, "TX9")
    with pytest.raises(CheckoutAlreadyProcessedError):
        await service.reject_checkout_request(checkout.id)

    stored = await read.checkout(checkout.id)
    assert stored.status == ("approved" if first == "approve" else "rejected")
    assert await read.balance(user_id) == balance_after_first


async def test_concurrent_approvals_resolve_once(session_factory, seed, read):
    user_id = await seed.user(balance_cents=5000)
    async with session_factory() as session:
        checkout = await CheckoutService.with_session(session).create_checkout_request(user_id, "50")

    async def approve(number):
        async with session_factory() as session:
            try:
                await CheckoutService.with_session(session).approve_checkout_request(checkout.id, number)
                return number
            except AlreadyProcessedError:
                return None

    results = await asyncio.gather(approve("TX-A"), approve("TX-B"))

    winners = [r for r in results if r is not None]
    assert len(winners) == 1
    assert (await read.checkout(checkout.id)).transfer_number == winners[0]


async def test_balance_never_negative_over_random_operations(db, seed, read):
    rng = random.Random(20261019)
    user_id = await seed.user(balance_cents=0)
    tasks = TaskService.with_session(db)
    checkouts = CheckoutService.with_session(db, refund_on_reject=True)
    task_ids = [await seed.task(user_id, cost_cents=rng.randint(0, 5000)) for _ in range(6)]
    open_checkouts: list[str] = []

    for _ in range(60):
        action = rng.choice(["complete", "reopen", "checkout", "approve", "reject"])
        try:
            if action == "complete":
                await tasks.set_task_status(rng.choice(task_ids), "completed")
            elif action == "reopen":
                await tasks.set_task_status(rng.choice(task_ids), "in_progress")
            elif action == "checkout":
                cents = rng.randint(1, 4000)
                checkout = await checkouts.create_checkout_request(user_id, Decimal(cents) / 100)
                open_checkouts.append(checkout.id)
            elif open_checkouts:
                checkout_id = rng.choice(open_checkouts)
                if action == "approve":
                    await checkouts.approve_checkout_request(checkout_id, "TX")
                else:
                    await checkouts.reject_checkout_request(checkout_id)
        except (InsufficientBalanceError, AlreadyProcessedError):
            pass
        assert await read.balance(user_id) >= 0

    total_credit = sum([
        (await read.task(task_id)).cost_cents
        for task_id in task_ids
        if (await read.task(task_id)).credited_at is not None
    ])
    assert await read.balance(user_id) <= total_credit
