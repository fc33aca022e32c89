#!/usr/bin/env python3
"""
CLI entrypoint for the Android schema generator.

Usage:
  python -m app.cli <android-sdk> [additional-library ...] [flags]

Flags:
  -o, --output DIR   output directory (default: generated)
  --no-import        do not emit <xs:import> for the android namespace
  --compact          write the schemas without indentation
  -v / -q            more / less logging
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from typing import List, Optional

from lxml import etree

from app.config import GeneratorConfig, DEFAULT_CONFIG
from core.sdk_structure import AndroidSdkStructure
from gen.xsd.generator import SchemaGenerator
from utils.logging_config import configure_logging, level_from_verbosity

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="android-schema-generator",
        description="Generate XML schemas for Android layout files from an Android SDK.",
    )
    ap.add_argument("sdk_home", help="Path to the Android SDK")
    ap.add_argument("libraries", nargs="*", help="Additional library files (must exist)")
    ap.add_argument("-o", "--output", default=DEFAULT_CONFIG.output_directory,
                    help="Output directory for the generated schemas")
    ap.add_argument("--no-import", action="store_true",
                    help="Do not import the attribute schema from the layout schema")
    ap.add_argument("--compact", action="store_true", help="Do not indent the output")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    ap.add_argument("-q", "--quiet", action="count", default=0)
    return ap


def parse_cli(argv: List[str], config: GeneratorConfig) -> tuple[argparse.Namespace, GeneratorConfig]:
    args = build_parser().parse_args(argv)
    cfg = replace(
        config,
        output_directory=args.output,
        import_attributes_schema=not args.no_import,
        pretty_print=not args.compact,
    )
    return args, cfg


def missing_libraries(libraries: List[str]) -> List[str]:
    return [f for f in libraries if not os.path.isfile(f)]


def report_sdk(sdk: AndroidSdkStructure) -> None:
    logger.info("Android SDK: %s", sdk.home)
    logger.info("Latest platform: %s", sdk.latest_platform)
    for extlib in sdk.extra_libraries:
        logger.info("  Extra: %s", extlib)
    for wi in sdk.widgets:
        logger.debug("  WidgetType: %s %s -extends- %s", wi.kind.name, wi.full_name, wi.base_type_name)
    for ds in sdk.declared_styleables:
        logger.debug("  Declared Styleable: %s", ds.name)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        args, cfg = parse_cli(argv, DEFAULT_CONFIG)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1

    configure_logging(level_from_verbosity(args.verbose, args.quiet))

    missing = missing_libraries(args.libraries)
    if missing:
        logger.error("One or more specified additional libraries do not exist: %s", ", ".join(missing))
        return 1

    try:
        sdk = AndroidSdkStructure.from_sdk_home(args.sdk_home)
        report_sdk(sdk)
        SchemaGenerator(cfg).generate(sdk)
    except (ValueError, OSError, etree.XMLSyntaxError) as e:
        logger.error("%s", e)
        return 1

    logger.info("Written %s and %s", cfg.layout_path, cfg.attributes_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
