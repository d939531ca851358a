"""Tests for the order created template."""

from decimal import Decimal

from notifications.templates.order_created import OrderCreatedTemplate


class TestOrderCreatedTemplate:
    def test_renders_order_id_and_total(self):
        body = OrderCreatedTemplate.render(
            {
                "order_id": "abc123",
                "store_name": "Corner Shop",
                "total_price": Decimal("106.2"),
                "lines": [{"title": "Kettle", "price": Decimal("100")}],
            }
        )
        assert "#abc123" in body
        assert "Corner Shop" in body
        assert "Order Total: 106.20" in body
        assert "1. Kettle: 100.00" in body
        assert "Items: 1" in body

    def test_untitled_lines_are_numbered(self):
        body = OrderCreatedTemplate.render(
            {
                "order_id": "o-1",
                "total_price": Decimal("240"),
                "lines": [
                    {"title": None, "price": Decimal("50")},
                    {"title": None, "price": Decimal("150")},
                ],
            }
        )
        assert "1. Item 1: 50.00" in body
        assert "2. Item 2: 150.00" in body
        assert "Items: 2" in body

    def test_total_rounds_half_up_for_display(self):
        body = OrderCreatedTemplate.render({"order_id": "o-2", "total_price": Decimal("0.900405"), "lines": []})
        assert "Order Total: 0.90" in body

    def test_defaults(self):
        body = OrderCreatedTemplate.render({"total_price": Decimal("0")})
        assert "#N/A" in body
        assert "ShopCart" in body
