"""Entry point for ChartOpt-Lab."""

import argparse
import logging
import sys
from chartopt_lab.config import load_config
from chartopt_lab.pipeline import load_option, run_pipeline


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="ChartOpt-Lab: resolve chart component options")
    parser.add_argument(
        "--config", "-c",
        default="config/default.yaml",
        help="Path to config file (default: config/default.yaml)"
    )
    parser.add_argument(
        "--option", "-o",
        default=None,
        help="Option file to resolve (overrides input.option_path)"
    )
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(
        format=config.logging.format,
        level=logging.WARNING,
    )
    logging.getLogger("chartopt_lab").setLevel(config.logging.level.upper())
    logger = logging.getLogger(__name__)

    option = load_option(args.option) if args.option else None
    try:
        run_pipeline(config, option)
    except Exception as e:
        logger.error("Failed to resolve option: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
