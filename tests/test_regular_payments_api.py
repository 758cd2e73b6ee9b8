from datetime import datetime
from decimal import Decimal

import pytest


def when(value: str) -> datetime:
    return datetime.fromisoformat(value)


async def create_payment(client, headers, category, account, **overrides):
    body = {
        "name": "Rent",
        "amount": "1200.00",
        "frequency": "monthly",
        "category_id": category["id"],
        "account_id": account["id"],
        "next_due_date": "2026-01-31T00:00:00Z",
    }
    body.update(overrides)
    return await client.post("/regular-payments", json=body, headers=headers)


@pytest.mark.asyncio
async def test_create_and_get(client, auth_headers, category, account):
    response = await create_payment(client, auth_headers, category, account, tags=["home"])
    assert response.status_code == 201, response.text
    payment = response.json()
    assert payment["is_active"] is True
    assert payment["tags"] == ["home"]
    assert Decimal(payment["amount"]) == Decimal("1200")

    response = await client.get(f"/regular-payments/{payment['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert when(response.json()["next_due_date"]) == when("2026-01-31T00:00:00+00:00")


@pytest.mark.asyncio
async def test_due_date_must_be_in_future(client, auth_headers, category, account):
    response = await create_payment(client, auth_headers, category, account, next_due_date="2026-01-10T00:00:00Z")

    assert response.status_code == 400
    assert response.json()["detail"] == "Next due date must be in the future"


@pytest.mark.asyncio
async def test_due_date_must_precede_end_date(client, auth_headers, category, account):
    response = await create_payment(
        client, auth_headers, category, account, end_date="2026-01-20T00:00:00Z"
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Next due date must be before end date"


@pytest.mark.asyncio
async def test_inactive_category_is_rejected(client, auth_headers, category, account):
    await client.patch(f"/categories/{category['id']}", json={"is_active": False}, headers=auth_headers)

    response = await create_payment(client, auth_headers, category, account)

    assert response.status_code == 404
    assert response.json()["detail"] == "Category not found or inactive"


@pytest.mark.asyncio
async def test_deleted_account_is_rejected(client, auth_headers, category, account):
    await client.delete(f"/accounts/{account['id']}", headers=auth_headers)

    response = await create_payment(client, auth_headers, category, account)

    assert response.status_code == 404
    assert response.json()["detail"] == "Account not found or inactive"


@pytest.mark.asyncio
async def test_missing_account_is_not_found(client, auth_headers, category, account):
    response = await create_payment(client, auth_headers, category, {"id": 999})

    assert response.status_code == 404
    assert response.json()["detail"] == "Account not found"


@pytest.mark.asyncio
async def test_rollover_clamps_month_end(client, auth_headers, category, account):
    payment = (await create_payment(client, auth_headers, category, account)).json()

    response = await client.patch(f"/regular-payments/{payment['id']}/next-due-date", headers=auth_headers)
    assert response.status_code == 200
    assert when(response.json()["next_due_date"]) == when("2026-02-28T00:00:00+00:00")

    response = await client.patch(f"/regular-payments/{payment['id']}/next-due-date", headers=auth_headers)
    assert when(response.json()["next_due_date"]) == when("2026-03-28T00:00:00+00:00")


@pytest.mark.asyncio
async def test_rollover_past_end_date_deactivates(client, auth_headers, category, account):
    payment = (
        await create_payment(
            client,
            auth_headers,
            category,
            account,
            frequency="weekly",
            next_due_date="2026-03-01T00:00:00Z",
            end_date="2026-03-05T00:00:00Z",
        )
    ).json()
    url = f"/regular-payments/{payment['id']}/next-due-date"

    response = await client.patch(url, headers=auth_headers)
    assert response.status_code == 200
    rolled = response.json()
    assert rolled["is_active"] is False
    assert when(rolled["next_due_date"]) == when("2026-03-08T00:00:00+00:00")

    response = await client.patch(url, headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Regular payment not found"


@pytest.mark.asyncio
async def test_update_can_clear_end_date(client, auth_headers, category, account):
    payment = (
        await create_payment(client, auth_headers, category, account, end_date="2026-12-31T00:00:00Z")
    ).json()

    response = await client.patch(
        f"/regular-payments/{payment['id']}",
        json={"end_date": None, "name": "Flat rent"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["end_date"] is None
    assert response.json()["name"] == "Flat rent"


@pytest.mark.asyncio
async def test_update_rejects_end_before_due(client, auth_headers, category, account):
    payment = (await create_payment(client, auth_headers, category, account)).json()

    response = await client.patch(
        f"/regular-payments/{payment['id']}",
        json={"end_date": "2026-01-20T00:00:00Z"},
        headers=auth_headers,
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_of_overdue_payment_needs_new_due_date(client, auth_headers, category, account, set_clock):
    payment = (
        await create_payment(client, auth_headers, category, account, name="Gym", next_due_date="2026-01-20T00:00:00Z")
    ).json()
    set_clock(when("2026-03-01T00:00:00+00:00"))
    url = f"/regular-payments/{payment['id']}"

    response = await client.patch(url, json={"name": "Gym2"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Next due date must be in the future"

    response = await client.get(url, headers=auth_headers)
    assert response.json()["name"] == "Gym"

    response = await client.patch(
        url, json={"name": "Gym2", "next_due_date": "2026-03-20T00:00:00Z"}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Gym2"


@pytest.mark.asyncio
async def test_stats_leave_out_ended_payments(client, auth_headers, category, account, set_clock):
    ended = (
        await create_payment(client, auth_headers, category, account, name="Trial", amount="100",
                             next_due_date="2026-01-20T00:00:00Z", end_date="2026-02-01T00:00:00Z")
    ).json()
    await create_payment(client, auth_headers, category, account, name="Rent")

    response = await client.patch(f"/regular-payments/{ended['id']}/next-due-date", headers=auth_headers)
    assert response.json()["is_active"] is False

    set_clock(when("2026-03-01T00:00:00+00:00"))
    response = await client.get("/regular-payments/stats", headers=auth_headers)

    stats = response.json()
    assert stats["total_payments"] == 1
    assert stats["active_payments"] == 1
    assert Decimal(stats["total_monthly_amount"]) == Decimal("1200")
    assert stats["overdue_payments"] == 1
    assert [p["name"] for p in stats["payments"]] == ["Rent"]


@pytest.mark.asyncio
async def test_upcoming_and_stats(client, auth_headers, category, account):
    await create_payment(client, auth_headers, category, account, name="Gym", amount="100", frequency="weekly",
                         next_due_date="2026-01-18T00:00:00Z")
    await create_payment(client, auth_headers, category, account, name="Rent")
    await create_payment(client, auth_headers, category, account, name="Insurance", amount="120",
                         frequency="yearly", next_due_date="2026-06-01T00:00:00Z")

    response = await client.get("/regular-payments/upcoming", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["days"] == 30
    assert [p["name"] for p in body["regular_payments"]] == ["Gym", "Rent"]

    response = await client.get("/regular-payments/upcoming", params={"days": 5}, headers=auth_headers)
    assert [p["name"] for p in response.json()["regular_payments"]] == ["Gym"]

    response = await client.get("/regular-payments/upcoming", params={"days": 400}, headers=auth_headers)
    assert response.status_code == 422

    response = await client.get("/regular-payments/stats", headers=auth_headers)
    assert response.status_code == 200
    stats = response.json()
    assert stats["total_payments"] == 3
    assert stats["active_payments"] == 3
    assert Decimal(stats["total_monthly_amount"]) == Decimal("433") + Decimal("1200") + Decimal("10")
    assert stats["frequency_stats"] == {"weekly": 1, "monthly": 1, "yearly": 1}
    assert Decimal(stats["category_stats"]["Housing"]) == Decimal("1420")
    assert stats["upcoming_payments"] == 1
    assert stats["overdue_payments"] == 0
    assert {p["account"] for p in stats["payments"]} == {"Main checking"}
    assert {p["color"] for p in stats["payments"]} == {"#FF5733"}


@pytest.mark.asyncio
async def test_list_filters_sorts_and_paginates(client, auth_headers, category, account):
    for i, due in enumerate(["2026-03-01", "2026-02-01", "2026-04-01"]):
        await create_payment(client, auth_headers, category, account, name=f"P{i}",
                             next_due_date=f"{due}T00:00:00Z", frequency="monthly" if i else "weekly")

    response = await client.get("/regular-payments", params={"limit": 2}, headers=auth_headers)
    body = response.json()
    assert [p["name"] for p in body["regular_payments"]] == ["P1", "P0"]
    assert body["pagination"] == {"current_page": 1, "total_pages": 2, "total_count": 3, "limit": 2}

    response = await client.get(
        "/regular-payments", params={"frequency": "weekly"}, headers=auth_headers
    )
    assert [p["name"] for p in response.json()["regular_payments"]] == ["P0"]

    response = await client.get(
        "/regular-payments", params={"sort_by": "name", "sort_order": "desc"}, headers=auth_headers
    )
    assert [p["name"] for p in response.json()["regular_payments"]] == ["P2", "P1", "P0"]


@pytest.mark.asyncio
async def test_deleted_and_foreign_payments_are_hidden(client, auth_headers, other_headers, category, account):
    payment = (await create_payment(client, auth_headers, category, account)).json()

    response = await client.get(f"/regular-payments/{payment['id']}", headers=other_headers)
    assert response.status_code == 404

    response = await client.delete(f"/regular-payments/{payment['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Regular payment deleted successfully"}

    response = await client.get(f"/regular-payments/{payment['id']}", headers=auth_headers)
    assert response.status_code == 404

    response = await client.patch(f"/regular-payments/{payment['id']}/next-due-date", headers=auth_headers)
    assert response.status_code == 404

    response = await client.get("/regular-payments", headers=auth_headers)
    assert response.json()["pagination"]["total_count"] == 0
