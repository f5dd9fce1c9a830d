import weakref
from typing import Optional
from .abstract_builder import HouseBuilder


class BuilderNotSetError(RuntimeError):
    """Director used before a builder was assigned, or after it was collected"""


class Director:
    """
    Fixes the order of build steps. Only keeps a weak reference to the
    builder and never calls get_result(): collecting the House is up to the
    caller.
    """

    def __init__(self, builder: Optional[HouseBuilder] = None) -> None:
        self.__builder_ref: Optional[weakref.ref] = None
        if builder is not None:
            self.set_builder(builder)

    def set_builder(self, builder: HouseBuilder) -> None:
        self.__builder_ref = weakref.ref(builder)

    # Build only essential parts
    def build_minimal_house(self) -> None:
        builder = self.__builder()
        builder.build_walls()
        builder.build_doors()

    # Build everything
    def build_full_house(self) -> None:
        builder = self.__builder()
        builder.build_walls()
        builder.build_doors()
        builder.build_windows()

    def __builder(self) -> HouseBuilder:
        if self.__builder_ref is None:
            raise BuilderNotSetError("Director has no builder, call set_builder() first")
        builder = self.__builder_ref()
        if builder is None:
            raise BuilderNotSetError("Director's builder was set but has since been garbage-collected, "
                                     "keep a reference to it while the Director is in use")
        return builder
