"""
Unit tests for the group order endpoints.

Tests cover:
- Organising group orders and validating prices and deadlines
- Joining: counters, duplicates, capacity, closed and expired group orders
- Completing and cancelling as organizer
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from vendorlink.core.database.base import utc_now_naive
from vendorlink.core.database.repositories import GroupOrderRepository, OrderRepository

from ...conftest import BOTH_ID, OTHER_VENDOR_ID, SUPPLIER_ID, VENDOR_ID


def _group_payload(product_id: str, **overrides) -> dict:
    payload = {
        "productId": product_id,
        "title": "Weekly onion run",
        "targetQuantity": 50,
        "maxParticipants": 5,
        "regularPricePerUnit": "12.50",
        "groupPricePerUnit": "10.00",
        "deadline": (utc_now_naive() + timedelta(days=2)).isoformat(),
    }
    payload.update(overrides)
    return payload


class TestCreateGroupOrder:
    """Tests for POST /api/group-orders."""

    @pytest.mark.asyncio
    async def test_organizer_is_the_caller(self, client, login_as, product):
        """Test that a new group order starts empty and active."""
        login_as(VENDOR_ID)

        response = await client.post("/api/group-orders", json=_group_payload(product.id))

        assert response.status_code == 201
        data = response.json()
        assert data["organizerId"] == VENDOR_ID
        assert data["status"] == "active"
        assert data["currentQuantity"] == 0
        assert data["currentParticipants"] == 0

    @pytest.mark.asyncio
    async def test_group_price_above_regular_is_rejected(self, client, login_as, product):
        """Test that the group price may not exceed the regular price."""
        login_as(VENDOR_ID)

        response = await client.post(
            "/api/group-orders", json=_group_payload(product.id, groupPricePerUnit="13.00")
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid group order data"

    @pytest.mark.asyncio
    async def test_past_deadline_is_rejected(self, client, login_as, product):
        """Test that the deadline must be in the future."""
        login_as(VENDOR_ID)
        past = (utc_now_naive() - timedelta(hours=1)).isoformat()

        response = await client.post("/api/group-orders", json=_group_payload(product.id, deadline=past))

        assert response.status_code == 400
        assert response.json()["message"] == "Deadline must be in the future"

    @pytest.mark.asyncio
    async def test_unknown_product_returns_404(self, client, login_as, users):
        """Test that the product must exist."""
        login_as(VENDOR_ID)

        response = await client.post("/api/group-orders", json=_group_payload("missing"))

        assert response.status_code == 404


class TestListGroupOrders:
    """Tests for reading group orders."""

    @pytest.mark.asyncio
    async def test_only_active_group_orders_are_listed(self, client, login_as, session, group_order):
        """Test that cancelled group orders are not listed."""
        login_as(VENDOR_ID)
        assert [g["id"] for g in (await client.get("/api/group-orders")).json()] == [group_order.id]

        group_order.status = "cancelled"
        session.add(group_order)
        await session.commit()

        assert (await client.get("/api/group-orders")).json() == []

    @pytest.mark.asyncio
    async def test_get_missing_group_order_returns_404(self, client, login_as, users):
        """Test that an unknown group order is a 404."""
        login_as(VENDOR_ID)

        response = await client.get("/api/group-orders/missing")

        assert response.status_code == 404
        assert response.json() == {"message": "Group order not found"}


class TestJoinGroupOrder:
    """Tests for POST /api/group-orders/{id}/join."""

    @pytest.mark.asyncio
    async def test_join_updates_counters(self, client, login_as, group_order):
        """Test that joining returns the participation and bumps the counters."""
        login_as(VENDOR_ID)

        response = await client.post(f"/api/group-orders/{group_order.id}/join", json={"quantity": 8})

        assert response.status_code == 200
        joined = response.json()
        assert joined["groupOrderId"] == group_order.id
        assert joined["vendorId"] == VENDOR_ID
        assert joined["quantity"] == 8
        assert joined["joinedAt"]

        data = (await client.get(f"/api/group-orders/{group_order.id}")).json()
        assert data["currentQuantity"] == 8
        assert data["currentParticipants"] == 1

        participants = (await client.get(f"/api/group-orders/{group_order.id}/participants")).json()
        assert [(p["vendorId"], p["quantity"]) for p in participants] == [(VENDOR_ID, 8)]

    @pytest.mark.asyncio
    async def test_joining_twice_is_a_conflict(self, client, login_as, group_order):
        """Test that a vendor can join a group order only once."""
        login_as(VENDOR_ID)
        await client.post(f"/api/group-orders/{group_order.id}/join", json={"quantity": 8})

        response = await client.post(f"/api/group-orders/{group_order.id}/join", json={"quantity": 2})

        assert response.status_code == 409
        assert response.json()["message"] == "You have already joined this group order"

    @pytest.mark.asyncio
    async def test_joining_full_group_order_is_a_conflict(self, client, login_as, session, group_order):
        """Test that the participant cap is enforced and counters stay unchanged."""
        for vendor_id in (VENDOR_ID, OTHER_VENDOR_ID):
            login_as(vendor_id)
            assert (await client.post(f"/api/group-orders/{group_order.id}/join", json={"quantity": 5})).status_code == 200

        login_as(SUPPLIER_ID)
        response = await client.post(f"/api/group-orders/{group_order.id}/join", json={"quantity": 5})

        assert response.status_code == 409
        assert response.json()["message"] == "Group order is full"
        refreshed = (await client.get(f"/api/group-orders/{group_order.id}")).json()
        assert refreshed["currentParticipants"] == 2
        assert refreshed["currentQuantity"] == 10

    @pytest.mark.asyncio
    async def test_joining_expired_group_order_is_a_conflict(self, client, login_as, session, group_order):
        """Test that a group order past its deadline cannot be joined."""
        group_order.deadline = utc_now_naive() - timedelta(minutes=1)
        session.add(group_order)
        await session.commit()
        login_as(VENDOR_ID)

        response = await client.post(f"/api/group-orders/{group_order.id}/join", json={"quantity": 5})

        assert response.status_code == 409
        assert response.json()["message"] == "Group order deadline has passed"

    @pytest.mark.asyncio
    async def test_joining_closed_group_order_is_a_conflict(self, client, login_as, session, group_order):
        """Test that a completed group order cannot be joined."""
        group_order.status = "completed"
        session.add(group_order)
        await session.commit()
        login_as(VENDOR_ID)

        response = await client.post(f"/api/group-orders/{group_order.id}/join", json={"quantity": 5})

        assert response.status_code == 409
        assert response.json()["message"] == "Group order is no longer active"

    @pytest.mark.asyncio
    async def test_invalid_quantity_is_rejected(self, client, login_as, group_order):
        """Test that the quantity must be positive."""
        login_as(VENDOR_ID)

        response = await client.post(f"/api/group-orders/{group_order.id}/join", json={"quantity": 0})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid participation data"

    @pytest.mark.asyncio
    async def test_join_missing_group_order_returns_404(self, client, login_as, users):
        """Test that joining an unknown group order is a 404."""
        login_as(VENDOR_ID)

        response = await client.post("/api/group-orders/missing/join", json={"quantity": 5})

        assert response.status_code == 404


class TestCloseGroupOrder:
    """Tests for PATCH /api/group-orders/{id}/status."""

    @pytest.mark.asyncio
    async def test_completing_creates_orders_at_group_price(self, client, login_as, session, group_order):
        """Test that completion places one pending order per participant."""
        login_as(VENDOR_ID)
        await client.post(f"/api/group-orders/{group_order.id}/join", json={"quantity": 12})
        login_as(OTHER_VENDOR_ID)
        await client.post(f"/api/group-orders/{group_order.id}/join", json={"quantity": 8})

        login_as(BOTH_ID)
        response = await client.patch(f"/api/group-orders/{group_order.id}/status", json={"status": "completed"})

        assert response.status_code == 200
        assert response.json()["status"] == "completed"
        orders = await OrderRepository(session).list_for_supplier(SUPPLIER_ID)
        assert sorted((o.vendor_id, o.total_amount) for o in orders) == [
            (VENDOR_ID, Decimal("120.00")),
            (OTHER_VENDOR_ID, Decimal("80.00")),
        ]
        assert all(o.group_order_id == group_order.id and o.status == "pending" for o in orders)

    @pytest.mark.asyncio
    async def test_completing_below_target_is_a_conflict(self, client, login_as, group_order):
        """Test that the target quantity has to be reached."""
        login_as(VENDOR_ID)
        await client.post(f"/api/group-orders/{group_order.id}/join", json={"quantity": 5})

        login_as(BOTH_ID)
        response = await client.patch(f"/api/group-orders/{group_order.id}/status", json={"status": "completed"})

        assert response.status_code == 409
        assert response.json()["message"] == "Target quantity not reached (5/20)"

    @pytest.mark.asyncio
    async def test_only_organizer_can_close(self, client, login_as, group_order):
        """Test that other users do not find the group order."""
        login_as(VENDOR_ID)

        response = await client.patch(f"/api/group-orders/{group_order.id}/status", json={"status": "cancelled"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_cancel_then_close_again_is_a_conflict(self, client, login_as, session, group_order):
        """Test that a closed group order stays closed."""
        login_as(BOTH_ID)

        first = await client.patch(f"/api/group-orders/{group_order.id}/status", json={"status": "cancelled"})
        second = await client.patch(f"/api/group-orders/{group_order.id}/status", json={"status": "completed"})

        assert first.status_code == 200
        assert second.status_code == 409
        assert await GroupOrderRepository(session).list_active() == []
