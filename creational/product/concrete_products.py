from .abstract_product import Transport, Chair
from typing import List, Tuple


# ──────────────────────────────────────────────────────────────
# Concrete Products - Transport
# ──────────────────────────────────────────────────────────────
class Truck(Transport):
    def deliver(self) -> str: return "Delivery by Truck"


class Ship(Transport):
    def deliver(self) -> str: return "Delivery by Ship"


# ──────────────────────────────────────────────────────────────
# Concrete Products - Chair
# ──────────────────────────────────────────────────────────────
class VictorianChair(Chair):
    def type(self) -> str: return "Victorian Chair"


class ModernChair(Chair):
    def type(self) -> str: return "Modern Chair"


# ──────────────────────────────────────────────────────────────
# Builder Product
# ──────────────────────────────────────────────────────────────
class House:
    """Ordered list of parts, filled in by a HouseBuilder"""

    def __init__(self) -> None:
        self.__parts: List[str] = []

    def add_part(self, part: str) -> None:
        self.__parts.append(part)

    def parts(self) -> Tuple[str, ...]:
        return tuple(self.__parts)

    def show(self) -> str:
        return "[Builder] House with: " + " ".join(self.__parts)

    def __len__(self) -> int:
        return len(self.__parts)

    def __repr__(self) -> str:
        return f"House(parts={self.__parts!r})"
