"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def get_by_user(self, user_id: str) -> Cart | None:
        for raw in self._load_raw():
            if raw["user_id"] == user_id:
                return self._to_domain(raw)
        return None

    def save(self, cart: Cart) -> None:
        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if raw["user_id"] == cart.user_id:
                records[i] = self._to_raw(cart)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(cart))
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "user_id": cart.user_id,
            "items": [
                {"product_id": item.product_id, "quantity": item.quantity.value}
                for item in cart.items
            ],
            "total_amount": str(cart.total_amount.amount),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            user_id=raw["user_id"],
            items=[
                CartItem(product_id=i["product_id"], quantity=Quantity(i["quantity"]))
                for i in raw["items"]
            ],
            total_amount=Money(Decimal(raw.get("total_amount", "0"))),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
