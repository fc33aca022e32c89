"""Parser for the platform's data/res/values/attrs.xml."""

import logging
from typing import List

from lxml import etree

from core.sdk_model import Attribute, AttributeFormat, AttributeValueEnumeration, Styleable
from sdk_types import AttributeName, StyleableName

logger = logging.getLogger(__name__)

RESOURCES_TAG = "resources"
STYLEABLE_TAG = "declare-styleable"
ATTR_TAG = "attr"
VALUE_TAGS = ("flag", "enum")


def parse_enumeration(el: etree._Element) -> AttributeValueEnumeration:
    return AttributeValueEnumeration(name=el.get("name"), value=el.get("value"))


def _location(el: etree._Element) -> str:
    url = el.getroottree().docinfo.URL
    return f"{url or '<string>'}:{el.sourceline}"


def _required_name(el: etree._Element) -> str:
    name = el.get("name")
    if not name:
        raise ValueError(f"<{el.tag}> without a name at {_location(el)}")
    return name


def parse_attribute(el: etree._Element) -> Attribute:
    return Attribute(
        name=AttributeName(_required_name(el)),
        formats=tuple(AttributeFormat.parse(el.get("format"))),
        enumerations=tuple(parse_enumeration(c) for c in el.iterchildren(*VALUE_TAGS)),
    )


def parse_styleable(el: etree._Element) -> Styleable:
    return Styleable(
        name=StyleableName(_required_name(el)),
        attributes=tuple(parse_attribute(c) for c in el.iterchildren(ATTR_TAG)),
    )


def parse_styleables(root: etree._Element) -> List[Styleable]:
    """Named styleables in document order, then one unnamed group for the root-level attrs."""
    if root.tag != RESOURCES_TAG:
        raise ValueError(f"Expected <{RESOURCES_TAG}> as the attrs document root, found <{root.tag}>")
    styleables: List[Styleable] = [parse_styleable(e) for e in root.iterchildren(STYLEABLE_TAG)]
    styleables.append(Styleable(
        name=None,
        attributes=tuple(parse_attribute(c) for c in root.iterchildren(ATTR_TAG)),
    ))
    return styleables


def load_styleables(path: str) -> List[Styleable]:
    tree = etree.parse(path)
    styleables = parse_styleables(tree.getroot())
    logger.info("Loaded %d styleables (%d global attributes) from %s",
                len(styleables) - 1, len(styleables[-1].attributes), path)
    return styleables


__all__ = [
    "parse_enumeration", "parse_attribute", "parse_styleable",
    "parse_styleables", "load_styleables",
]
