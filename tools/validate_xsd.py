#!/usr/bin/env python3
"""
Checks that generated schemas compile: parses each file and builds an
lxml XMLSchema from it, printing the first errors otherwise.

Usage:
  python tools/validate_xsd.py generated/android-layout.xsd generated/android-attributes.xsd [--max 5]
"""
from __future__ import annotations

import argparse
import os
from typing import List

from lxml import etree


def schema_errors(path: str, limit: int) -> List[str]:
    """Empty when the schema at path compiles, else up to limit error lines."""
    try:
        doc = etree.parse(path)
    except etree.XMLSyntaxError as e:
        return [f"not well-formed: {e}"]
    try:
        etree.XMLSchema(doc)
    except etree.XMLSchemaParseError as e:
        lines = [f"{err.line}: {err.message}" for err in e.error_log]
        return (lines or [str(e)])[:limit]
    return []


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("xsd_paths", nargs="+")
    ap.add_argument("--max", type=int, default=5)
    args = ap.parse_args()

    status = 0
    for path in args.xsd_paths:
        if not os.path.isfile(path):
            print(f"File not found: {path}")
            status = 2
            continue
        errors = schema_errors(path, args.max)
        if errors:
            print(f"{path}: INVALID")
            for line in errors:
                print(f"  {line}")
            status = max(status, 1)
        else:
            print(f"{path}: OK")
    return status


if __name__ == "__main__":
    raise SystemExit(main())
