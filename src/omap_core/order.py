"""Line items for media orders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Media:
    id: int
    title: str
    category: str
    price: int

    def iter_fields(self) -> Iterator[tuple[str, object]]:
        yield "id", self.id
        yield "title", self.title
        yield "category", self.category
        yield "price", self.price


@dataclass
class OrderMedia:
    """One media item in an order, with its quantity and unit price."""

    media: Media
    quantity: int
    price: int

    @property
    def amount(self) -> int:
        return self.quantity * self.price

    def iter_fields(self) -> Iterator[tuple[str, object]]:
        yield "media", self.media
        yield "quantity", self.quantity
        yield "price", self.price
