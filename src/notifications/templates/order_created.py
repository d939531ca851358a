"""Order created template — manager notification sent when a cart is checked out."""

from shared.money import quantize


class OrderCreatedTemplate:
    @staticmethod
    def render(context: dict) -> str:
        order_id = context.get("order_id", "N/A")
        store_name = context.get("store_name", "ShopCart")
        total_price = quantize(context["total_price"])
        lines = context.get("lines", [])

        body = [f"A new order #{order_id} was placed at {store_name}.", ""]
        for position, line in enumerate(lines, start=1):
            title = line.get("title") or f"Item {position}"
            body.append(f"  {position}. {title}: {quantize(line['price'])}")
        if lines:
            body.append("")
        body.append(f"Items: {len(lines)}")
        body.append(f"Order Total: {total_price}")
        return "\n".join(body)
