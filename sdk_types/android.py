#!/usr/bin/env python3
"""
Android SDK types and enums for the schema generator.
"""

from typing import NewType
from enum import Enum

# ---------- Type aliases for SDK metadata ----------
ClassName = NewType('ClassName', str)          # fully qualified Java class name
SchemaName = NewType('SchemaName', str)        # normalized XSD element/type name
AttributeName = NewType('AttributeName', str)
StyleableName = NewType('StyleableName', str)
FormatName = NewType('FormatName', str)


# ---------- Enums ----------
class ViewKind(Enum):
    """Role of a class in widgets.txt, taken from the per-line role code."""
    TO_BE_DETERMINED = "to-be-determined"
    WIDGET = "widget"
    LAYOUT = "layout"
    LAYOUT_PARAMS = "layout-params"
    OTHER = "other"

    @classmethod
    def from_code(cls, code: str) -> "ViewKind":
        return _KIND_CODES.get(code, cls.OTHER)


_KIND_CODES = {
    "L": ViewKind.LAYOUT,
    "P": ViewKind.LAYOUT_PARAMS,
    "W": ViewKind.WIDGET,
}
