from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal


class Engine:
    pass


class Car:
    def __init__(self, engine: Engine, price: Decimal | None = None):
        self.engine = engine
        self.price = price
