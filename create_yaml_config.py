# create_yaml_config.py
from pathlib import Path
from utils.config import DEFAULTS
import sys
import yaml

OUTPUT_YAML = Path("config.yaml")


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    output = Path(argv[0]) if argv else OUTPUT_YAML

    if output.exists():
        raise SystemExit(f"Refusing to overwrite existing file: {output}")

    # Keep key order so the file reads like the docs
    with output.open("w", encoding="utf-8") as f:
        yaml.safe_dump(DEFAULTS, f, sort_keys=False, allow_unicode=True)

    print(f"Created '{output}' with {len(DEFAULTS)} keys.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
