#!/usr/bin/env python3
"""
XML/XSD types for the Android schema generator.
"""

from typing import List, Dict, NewType, TYPE_CHECKING

if TYPE_CHECKING:
    from lxml import etree

# ---------- Type aliases for XML/XSD ----------
ContextStack = List['etree._Element']
ElementAttributes = Dict[str, str]
Namespace = NewType('Namespace', str)
QNameString = NewType('QNameString', str)   # prefixed name, e.g. "android:color"
