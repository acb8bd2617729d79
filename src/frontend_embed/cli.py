"""
CLI Entry point.

Builds the companion frontend and stages it for embedding. Meant to be
called from the enclosing build (e.g. a cargo build script) before the
application itself is compiled.
"""

import argparse
import logging
import sys
from dataclasses import dataclass

from frontend_embed.build import build_frontend
from frontend_embed.config import BuildConfig, add_config_arguments, resolve_config
from frontend_embed.print_banner import banner
from frontend_embed.types import UiBuildError


@dataclass
class CliArgs:
    config: BuildConfig
    force_install: bool
    force_build: bool
    skip_resources: bool
    verbose: bool

    @staticmethod
    def parse_args(args: list[str] | None = None) -> "CliArgs":
        return _parse_args(args)


def _parse_args(args: list[str] | None = None) -> CliArgs:
    parser = argparse.ArgumentParser(
        description="Build the web frontend and stage it as embeddable resources"
    )
    parser.add_argument(
        "--force-install",
        action="store_true",
        help="Reinstall dependencies even if node_modules exists",
    )
    parser.add_argument(
        "--force-build",
        action="store_true",
        help="Rebuild even if the staging directory has content",
    )
    parser.add_argument(
        "--skip-resources",
        action="store_true",
        help="Stop after staging, do not generate the resource manifest",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    add_config_arguments(parser)

    parsed = parser.parse_args(args)
    return CliArgs(
        config=resolve_config(parsed),
        force_install=parsed.force_install,
        force_build=parsed.force_build,
        skip_resources=parsed.skip_resources,
        verbose=parsed.verbose,
    )


def main(args: list[str] | None = None) -> int:
    cli_args = CliArgs.parse_args(args)
    if cli_args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        build_frontend(
            cli_args.config,
            force_install=cli_args.force_install,
            force_build=cli_args.force_build,
            generate_resources=not cli_args.skip_resources,
        )
    except (UiBuildError, OSError) as e:
        print(banner(f"Frontend build failed: {e}"))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
