from .abstract_builder import HouseBuilder, BuildState
from ..product.concrete_products import House
from utils.logger import Logger

FULL_HOUSE_PARTS = 3


class SimpleHouseBuilder(HouseBuilder):
    """
    Builds into a single House it owns.
    get_result() hands that House to the caller and starts a fresh one, so the
    builder can be reused without touching houses it has already returned.
    Steps are not deduplicated: build_walls() twice gives two "Walls".
    """

    def __init__(self) -> None:
        self.__house = House()

    def build_walls(self) -> None: self.__add("Walls")

    def build_doors(self) -> None: self.__add("Doors")

    def build_windows(self) -> None: self.__add("Windows")

    def get_result(self) -> House:
        result, self.__house = self.__house, House()
        Logger().debug("House extracted with parts %s", result.parts())
        return result

    def state(self) -> BuildState:
        count = len(self.__house)
        if count == 0:
            return BuildState.EMPTY
        if count < FULL_HOUSE_PARTS:
            return BuildState.PARTIAL
        return BuildState.COMPLETE

    def __add(self, part: str) -> None:
        self.__house.add_part(part)
        Logger().debug("Added %s, builder is %s", part, self.state().value)
