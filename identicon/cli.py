import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from identicon.config import DEFAULT_LOG_LEVEL, DEFAULT_OUTPUT_DIR, CliConfig
from identicon.errors import IdenticonError
from identicon.storage import save_image
from identicon.pipeline import generate

logger = logging.getLogger(__name__)

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


def parse_args(argv: Optional[Sequence[str]] = None) -> CliConfig:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Generate a symmetric 5x5 identicon PNG for each input string.",
    )
    parser.add_argument(
        "names",
        nargs="+",
        help="Input strings (e.g. usernames); each is saved as <name>.png.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help="Folder where generated identicons are written.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)
    return CliConfig(
        names=tuple(args.names),
        output_dir=args.output_dir,
        log_level=args.log_level,
    )


def run(config: CliConfig) -> int:
    """Generate and save every requested identicon.

    A failing name is logged and skipped; the remaining names still run.

    Returns:
        int: ``0`` if every identicon was written, ``1`` otherwise.
    """
    failed: List[str] = []
    for name in config.names:
        try:
            path = save_image(generate(name), name, config.output_dir)
        except (IdenticonError, OSError) as e:
            logger.error("Failed to generate identicon for %r: %s", name, e)
            failed.append(name)
            continue
        print(path)
    return 1 if failed else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
