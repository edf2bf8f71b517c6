#!/usr/bin/env python3
"""
Code Path Mapper - Main Entry Point

Preview where generated code and samples for a package would be written.
"""
import sys
import argparse
import logging
from pydantic import ValidationError
from rich.console import Console
import yaml

from .formatters.name_formatter import supported_languages
from .utils.config_loader import build_path_mapper, load_config

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathmapper",
        description="Compute output paths for generated code packages and samples",
        epilog="""
Examples:
  # Package directories below a prefix
  pathmapper google.cloud.speech --prefix src --append-package

  # Ruby-style layout for a sample
  pathmapper Google::Cloud::SpeechV1 --append-package --formatter ruby --sample recognize

  # Use settings from a configuration file
  pathmapper google.cloud.speech --config pathmapper.yaml
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("package_names", nargs="+", metavar="PACKAGE", help="Package name(s) to map")
    parser.add_argument("--sample", "-s", help="Method name to compute a sample path for")
    parser.add_argument("--prefix", "-p", help="Static first path segment (overrides config)")
    parser.add_argument(
        "--append-package",
        action="store_true",
        default=None,
        help="Append one directory per package name segment (overrides config)"
    )
    parser.add_argument(
        "--formatter", "-f",
        help=f"Package path formatter language ({', '.join(supported_languages())}); lowercase if unset"
    )
    parser.add_argument("--config", "-c", help="Path to configuration file")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)

    try:
        config = load_config(args.config)
        mapper_settings = config.setdefault('path_mapper', {})
        if args.prefix is not None:
            mapper_settings['prefix'] = args.prefix
        if args.append_package is not None:
            mapper_settings['append_package'] = args.append_package
        if args.formatter is not None:
            mapper_settings['formatter'] = args.formatter

        mapper = build_path_mapper(config)
    except (ValueError, ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]❌ Configuration error: {e}[/red]")
        return 1

    logger.debug(f"Using {mapper!r}")

    for package_name in args.package_names:
        if args.sample:
            path = mapper.path_for_sample(package_name, args.sample)
        else:
            path = mapper.path_for_element(package_name)
        console.print(path, highlight=False, markup=False, soft_wrap=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
