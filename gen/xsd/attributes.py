#!/usr/bin/env python3
"""
Schema for the android attribute namespace (android-attributes.xsd).

Attributes listed inside an attribute group would become local
declarations, so every attribute is first declared globally (once per name)
and the groups only reference the global declarations.
"""

import logging
from typing import Dict, Iterable, List, Optional

from core.sdk_model import Attribute, Styleable
from gen.xsd.writer import XsdWriter
from meta import DEFAULT_META, MetaBundle
from sdk_types import AttributeName

logger = logging.getLogger(__name__)


def unique_attributes(styleables: Iterable[Styleable]) -> List[Attribute]:
    """First declaration of every attribute name, in styleable then attribute order.

    Later declarations under the same name are dropped without comparing them.
    """
    seen: Dict[AttributeName, Attribute] = {}
    for styleable in styleables:
        for attr in styleable.attributes:
            seen.setdefault(attr.name, attr)
    return list(seen.values())


def attribute_type_ref(attr: Attribute) -> Optional[str]:
    """Type of an attribute without enumerations: the first format's XSD type, if any."""
    if attr.has_enumerations or attr.primary_format is None:
        return None
    return attr.primary_format.xsd_type


class AndroidAttributesSchemaGenerator:
    def __init__(self, styleables: List[Styleable], meta: Optional[MetaBundle] = None) -> None:
        self.styleables = styleables
        self.meta: MetaBundle = meta or DEFAULT_META
        self.xml = self.meta.xml
        self.android = self.meta.android

    def build(self, writer: Optional[XsdWriter] = None) -> XsdWriter:
        writer = writer or XsdWriter(self.xml)
        writer.start_doc(target_namespace=self.xml.android_ns)
        self._write_primitive_types(writer)
        attributes = unique_attributes(self.styleables)
        for attr in attributes:
            self._write_attribute(writer, attr)
        for styleable in self.styleables:
            self._write_group(writer, styleable)
        writer.end_doc()
        logger.info("Attribute schema: %d attributes, %d attribute groups",
                    len(attributes), len(self.styleables))
        return writer

    def generate(self, out_path: str, pretty: bool = True) -> None:
        self.build().save(out_path, pretty=pretty)
        logger.info("Written %s", out_path)

    def group_name(self, styleable: Styleable) -> str:
        return styleable.name if styleable.name is not None else self.android.global_group_name

    def _write_primitive_types(self, writer: XsdWriter) -> None:
        for name in self.android.primitive_types:
            writer.write_string_restriction_type(name)

    def _write_attribute(self, writer: XsdWriter, attr: Attribute) -> None:
        if not attr.has_enumerations:
            writer.write_attribute(attr.name, attribute_type_ref(attr))
            return

        values_type = self.android.values_type_name(attr.name)
        writer.write_string_restriction_type(
            values_type, [e.name for e in attr.enumerations if e.name is not None])

        values_ref = self.xml.android_qname(values_type)
        primary = attr.primary_format
        writer.start_attribute(attr.name)
        writer.start_simple_type()
        if primary is not None and primary.name == self.android.enum_format:
            writer.write_restriction(values_ref)
        else:
            # flags: any space separated combination of the values
            writer.write_list(values_ref)
        writer.end_simple_type()
        writer.end_attribute()

    def _write_group(self, writer: XsdWriter, styleable: Styleable) -> None:
        writer.start_attribute_group(self.group_name(styleable))
        for attr in styleable.attributes:
            writer.write_attribute_ref(self.xml.android_qname(attr.name))
        writer.end_attribute_group()


__all__ = ["AndroidAttributesSchemaGenerator", "unique_attributes", "attribute_type_ref"]
