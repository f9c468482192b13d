"""
Command-line entry point: run the demos.

    python -m seqmap                      # all demos, text output
    python -m seqmap maps slices -f yaml  # selected demos plus a YAML snapshot
    python -m seqmap -c run.yaml -vv      # settings from a YAML file, debug logging
"""
import argparse
import logging
import sys
from typing import List, Optional

from seqmap.config import OUTPUT_FORMATS, DemoConfig, load_config
from seqmap.demos import DEMOS
from seqmap.serialization import snapshot_to_json, snapshot_to_yaml


logger = logging.getLogger("seqmap")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="seqmap", description="Run the container demos")
    parser.add_argument("demos", nargs="*", metavar="demo",
                        help=f"Demos to run (default: all of {', '.join(DEMOS)})")
    parser.add_argument("-c", "--config", help="Path to a YAML run configuration")
    parser.add_argument("-f", "--format", choices=OUTPUT_FORMATS, default=None,
                        help="Output format (default: text)")
    parser.add_argument("-v", "--verbose", action="count", default=None,
                        help="Increase log verbosity (-v info, -vv debug)")
    return parser


def configure_logging(verbosity: int) -> None:
    logger.handlers.clear()
    logger.setLevel({0: logging.ERROR, 1: logging.INFO}.get(verbosity, logging.DEBUG))
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(console_handler)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    unknown = [name for name in args.demos if name not in DEMOS]
    if unknown:
        parser.error(f"unknown demo(s): {', '.join(unknown)}")
    config = load_config(args.config) if args.config else DemoConfig()
    config = config.merged(demos=args.demos or None, output_format=args.format, verbosity=args.verbose)
    configure_logging(config.verbosity)

    built = {}
    for name in config.demos:
        logger.info("running %s demo", name)
        for key, value in DEMOS[name]().items():
            built[f"{name}.{key}"] = value

    if config.output_format == "yaml":
        print(snapshot_to_yaml(built), end="")
    elif config.output_format == "json":
        print(snapshot_to_json(built))
    return 0


if __name__ == "__main__":
    sys.exit(main())
