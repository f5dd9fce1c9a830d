from .abstract_factory import FurnitureFactory
from ..product.abstract_product import Chair
from ..product.concrete_products import VictorianChair, ModernChair

class VictorianFactory(FurnitureFactory):
    def create_chair(self) -> Chair:
        return VictorianChair()


class ModernFactory(FurnitureFactory):
    def create_chair(self) -> Chair:
        return ModernChair()
