from abc import ABC, abstractmethod
from enum import Enum
from ..product.concrete_products import House


class BuildState(Enum):
    EMPTY    = "empty"      # nothing added since the last get_result()
    PARTIAL  = "partial"    # 1-2 parts
    COMPLETE = "complete"   # walls, doors and windows (or more)


class HouseBuilder(ABC):
    @abstractmethod
    def build_walls(self) -> None: ...

    @abstractmethod
    def build_doors(self) -> None: ...

    @abstractmethod
    def build_windows(self) -> None: ...

    @abstractmethod
    def get_result(self) -> House: ...
