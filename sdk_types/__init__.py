#!/usr/bin/env python3
"""
Types module for the Android schema generator.
Centralized type definitions organized by domain.
"""

from .android import (
    ViewKind,
    ClassName, SchemaName, AttributeName, StyleableName, FormatName
)

from .xml import (
    ContextStack, ElementAttributes, Namespace, QNameString
)

__all__ = [
    # Android SDK types
    'ViewKind',
    'ClassName', 'SchemaName', 'AttributeName', 'StyleableName', 'FormatName',

    # XML/XSD types
    'ContextStack', 'ElementAttributes', 'Namespace', 'QNameString',
]
