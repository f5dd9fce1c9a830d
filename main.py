from __future__ import annotations
from typing import List, Optional, Sequence
from creational.factory.abstract_factory import Logistics, FurnitureFactory
from creational.factory.concrete_factory_logistics import RoadLogistics, SeaLogistics
from creational.factory.concrete_factory_furniture import VictorianFactory, ModernFactory
from creational.builder.concrete_builder import SimpleHouseBuilder
from creational.builder.director import Director
from utils.config import DemoConfig
from utils.logger import LEVELS, Logger
import argparse
import sys

ABSTRACT_FACTORY_TAG = "[Abstract Factory]"


# ── Abstract Factory client ───────────────────────────────────
def show_furniture(factory: "FurnitureFactory") -> str:
    # Only depends on the abstract factory
    chair = factory.create_chair()
    line = f"{ABSTRACT_FACTORY_TAG} Created: {chair.type()}"
    print(line)
    return line


# ── Variant selection ─────────────────────────────────────────
def choose_logistics(kind: str) -> "Logistics":
    if kind == "road":
        return RoadLogistics()
    elif kind == "sea":
        return SeaLogistics()
    raise ValueError(f"Unknown logistics kind: {kind}")


def choose_furniture_factory(style: str) -> "FurnitureFactory":
    if style == "victorian":
        return VictorianFactory()
    elif style == "modern":
        return ModernFactory()
    raise ValueError(f"Unknown furniture style: {style}")


# ── Demos ─────────────────────────────────────────────────────
def run_factory_method(kinds: Sequence[str]) -> List[str]:
    Logger().info("Factory Method demo: %s", ", ".join(kinds))
    return [choose_logistics(kind).plan_delivery() for kind in kinds]


def run_abstract_factory(styles: Sequence[str]) -> List[str]:
    Logger().info("Abstract Factory demo: %s", ", ".join(styles))
    return [show_furniture(choose_furniture_factory(style)) for style in styles]


def run_builder() -> List[str]:
    Logger().info("Builder demo")
    builder = SimpleHouseBuilder()
    director = Director(builder)
    lines = []

    director.build_minimal_house()
    minimal = builder.get_result()     # House with Walls, Doors
    lines.append(minimal.show())
    print(lines[-1])

    director.build_full_house()
    full = builder.get_result()        # House with Walls, Doors, Windows
    lines.append(full.show())
    print(lines[-1])
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Factory Method, Abstract Factory and Builder demo")
    parser.add_argument("--config", default="config.yaml", help="YAML config file, optional")
    parser.add_argument("--log-level", choices=list(LEVELS), help="Overrides log_level from the config")
    options = parser.parse_args(argv)

    config = DemoConfig(options.config)
    config.load_config()
    if options.log_level:
        config.override_log_level(options.log_level)

    Logger(level=config.log_level(), to_file=config.log_to_file(), log_dir=config.log_dir())
    if config.loaded_from() is not None:
        Logger().info("Config loaded from %s", config.loaded_from())
    else:
        Logger().info("No config at %s, using defaults", options.config)

    run_factory_method(config.logistics())
    run_abstract_factory(config.furniture())
    if config.builder():
        run_builder()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        Logger().critical("Fatal error: %s", e, exc_info=True)
        sys.exit(1)
