#!/usr/bin/env python3
"""
Core module: the in-memory model of an Android SDK platform and the
parsers that build it from widgets.txt and attrs.xml.
"""

# Re-export commonly used core components
from .sdk_model import (
    AttributeFormat, AttributeValueEnumeration, Attribute, Styleable, TypeInformation
)

__all__ = [
    'AttributeFormat', 'AttributeValueEnumeration', 'Attribute', 'Styleable', 'TypeInformation',
]
