"""Minimal example for ParseMapping with a self-constructing type."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Self

from keypath_parse import ParseError, ParseMapping


PAYLOAD = """
{
  "order": {
    "id": "1042",
    "paid": "yes",
    "status": "shipped",
    "placed_at": "2017-02-08T12:15:00-0800",
    "tracking_url": "https://example.com/track/1042",
    "note": null,
    "lines": [
      {"sku": "A-1", "quantity": 2, "price": "9.99"},
      {"sku": "B-7", "quantity": "1", "price": 24.5}
    ]
  }
}
"""


class Status(Enum):
    PENDING = "pending"
    SHIPPED = "shipped"


@dataclass
class Line:
    sku: str
    quantity: int
    price: float

    @classmethod
    def from_json(cls, json: ParseMapping) -> Self:
        return cls(sku=json.parse_str("sku"), quantity=json.parse_int("quantity"), price=json.parse_float("price"))


@dataclass
class Order:
    order_id: int
    paid: bool
    status: Status
    placed_at: datetime
    tracking_url: str
    note: str | None
    lines: list[Line]

    @classmethod
    def from_json(cls, json: ParseMapping) -> Self:
        return cls(
            order_id=json.parse_int("id"),
            paid=json.parse_bool("paid"),
            status=json.parse_enum("status", Status),
            placed_at=json.parse_date("placed_at"),
            tracking_url=json.parse_url("tracking_url").geturl(),
            note=json.parse_optional_str("note"),
            lines=json.parse_parsable_list("lines", Line),
        )


def main() -> None:
    """Build an Order from a JSON payload and show a failing lookup."""
    json_data = ParseMapping(json.loads(PAYLOAD))
    order = json_data.parse_parsable("order", Order)
    print(f"{order=}")
    print("first sku:", order.lines[0].sku)

    try:
        _ = json_data.parse_int("order.customer.id")
    except ParseError as exc:
        print("error:", exc)


if __name__ == "__main__":
    main()
