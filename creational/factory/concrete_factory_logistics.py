from .abstract_factory import Logistics
from ..product.abstract_product import Transport
from ..product.concrete_products import Truck, Ship

class RoadLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Truck()


class SeaLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Ship()
