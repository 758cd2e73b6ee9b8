from decimal import Decimal

import pytest


async def create_budget(client, headers, category, start="2026-01-01", end="2026-01-31", **overrides):
    body = {
        "category_id": category["id"],
        "name": "Housing budget",
        "amount": "1500",
        "period": "monthly",
        "start_date": f"{start}T00:00:00Z",
        "end_date": f"{end}T00:00:00Z",
    }
    body.update(overrides)
    return await client.post("/budgets", json=body, headers=headers)


@pytest.mark.asyncio
async def test_create_budget(client, auth_headers, category):
    response = await create_budget(client, auth_headers, category)

    assert response.status_code == 201, response.text
    budget = response.json()
    assert budget["period"] == "monthly"
    assert Decimal(budget["amount"]) == Decimal("1500")


@pytest.mark.asyncio
async def test_start_must_precede_end(client, auth_headers, category):
    response = await create_budget(client, auth_headers, category, start="2026-02-01", end="2026-01-01")

    assert response.status_code == 400
    assert response.json()["detail"] == "Start date must be before end date"


@pytest.mark.asyncio
async def test_overlapping_budget_conflicts(client, auth_headers, category):
    await create_budget(client, auth_headers, category)

    # Touching the previous end date counts as overlap
    response = await create_budget(client, auth_headers, category, start="2026-01-31", end="2026-02-28")

    assert response.status_code == 409
    assert response.json()["detail"] == "Budget already exists for this category in the specified date range"

    response = await create_budget(client, auth_headers, category, start="2026-02-01", end="2026-02-28")
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_other_category_does_not_conflict(client, auth_headers, category):
    other = (await client.post("/categories", json={"name": "Food"}, headers=auth_headers)).json()
    await create_budget(client, auth_headers, category)

    response = await create_budget(client, auth_headers, other)

    assert response.status_code == 201


@pytest.mark.asyncio
async def test_deleted_budget_frees_its_range(client, auth_headers, category):
    budget = (await create_budget(client, auth_headers, category)).json()
    response = await client.delete(f"/budgets/{budget['id']}", headers=auth_headers)
    assert response.json() == {"message": "Budget deleted successfully"}

    response = await create_budget(client, auth_headers, category)

    assert response.status_code == 201


@pytest.mark.asyncio
async def test_update_excludes_itself_but_not_others(client, auth_headers, category):
    january = (await create_budget(client, auth_headers, category)).json()
    await create_budget(client, auth_headers, category, start="2026-03-01", end="2026-03-31")

    response = await client.patch(
        f"/budgets/{january['id']}",
        json={"end_date": "2026-02-15T00:00:00Z", "amount": "1600"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert Decimal(response.json()["amount"]) == Decimal("1600")

    response = await client.patch(
        f"/budgets/{january['id']}",
        json={"end_date": "2026-03-01T00:00:00Z"},
        headers=auth_headers,
    )
    assert response.status_code == 409

    response = await client.patch(
        f"/budgets/{january['id']}",
        json={"start_date": "2026-02-20T00:00:00Z"},
        headers=auth_headers,
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_inactive_category_is_rejected(client, auth_headers, category):
    await client.patch(f"/categories/{category['id']}", json={"is_active": False}, headers=auth_headers)

    response = await create_budget(client, auth_headers, category)

    assert response.status_code == 404
    assert response.json()["detail"] == "Category not found or inactive"


@pytest.mark.asyncio
async def test_current_and_stats(client, auth_headers, category):
    await create_budget(client, auth_headers, category, name="January")
    await create_budget(client, auth_headers, category, name="March", start="2026-03-01", end="2026-03-31",
                        period="weekly", amount="100")

    response = await client.get("/budgets/current", headers=auth_headers)
    assert response.status_code == 200
    assert [b["name"] for b in response.json()] == ["January"]

    response = await client.get("/budgets/stats", headers=auth_headers)
    stats = response.json()
    assert stats["total_budgets"] == 2
    assert stats["active_budgets"] == 2
    assert Decimal(stats["total_budget_amount"]) == Decimal("1600")
    assert stats["period_stats"] == {"monthly": 1, "weekly": 1}
    assert Decimal(stats["category_stats"]["Housing"]) == Decimal("1600")
    assert {b["color"] for b in stats["budgets"]} == {"#FF5733"}


@pytest.mark.asyncio
async def test_inactive_budgets_are_left_out(client, auth_headers, category):
    food = (await client.post("/categories", json={"name": "Food"}, headers=auth_headers)).json()
    await create_budget(client, auth_headers, category, name="January")
    await create_budget(client, auth_headers, food, name="Paused", amount="999", period="weekly", is_active=False)

    response = await client.get("/budgets/stats", headers=auth_headers)
    stats = response.json()
    assert stats["total_budgets"] == 1
    assert Decimal(stats["total_budget_amount"]) == Decimal("1500")
    assert stats["period_stats"] == {"monthly": 1}
    assert "Food" not in stats["category_stats"]
    assert [b["name"] for b in stats["budgets"]] == ["January"]

    response = await client.get("/budgets/current", headers=auth_headers)
    assert [b["name"] for b in response.json()] == ["January"]


@pytest.mark.asyncio
async def test_list_and_search(client, auth_headers, category):
    await create_budget(client, auth_headers, category, name="Winter rent")
    await create_budget(client, auth_headers, category, name="Spring rent", start="2026-04-01", end="2026-04-30",
                        is_active=False)

    response = await client.get("/budgets", params={"search": "spring"}, headers=auth_headers)
    assert [b["name"] for b in response.json()["budgets"]] == ["Spring rent"]

    response = await client.get("/budgets", params={"is_active": "true"}, headers=auth_headers)
    assert [b["name"] for b in response.json()["budgets"]] == ["Winter rent"]

    response = await client.get("/budgets", params={"sort_by": "start_date", "sort_order": "asc"}, headers=auth_headers)
    assert [b["name"] for b in response.json()["budgets"]] == ["Winter rent", "Spring rent"]


@pytest.mark.asyncio
async def test_foreign_budget_is_not_found(client, auth_headers, other_headers, category):
    budget = (await create_budget(client, auth_headers, category)).json()

    response = await client.get(f"/budgets/{budget['id']}", headers=other_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Budget not found"
