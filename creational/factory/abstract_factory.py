from abc import ABC, abstractmethod
from ..product.abstract_product import Transport, Chair
from utils.logger import Logger

FACTORY_METHOD_TAG = "[Factory Method]"

# ──────────────────────────────────────────────────────────────
# Factory Method - Creator
# ──────────────────────────────────────────────────────────────

class Logistics(ABC):
    @abstractmethod
    def create_transport(self) -> Transport: ...

    def plan_delivery(self) -> str:
        """
        Create one transport through the factory method, deliver with it and
        print the result. The transport is dropped when the call returns.
        """
        transport = self.create_transport()
        Logger().debug("%s created %s", type(self).__name__, type(transport).__name__)
        line = f"{FACTORY_METHOD_TAG} {transport.deliver()}"
        print(line)
        return line

# ──────────────────────────────────────────────────────────────
# Abstract Factory
# ──────────────────────────────────────────────────────────────

class FurnitureFactory(ABC):
    @abstractmethod
    def create_chair(self) -> Chair: ...
