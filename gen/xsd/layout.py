#!/usr/bin/env python3
"""
Schema for layout files in the default namespace (android-layout.xsd).

Every widget class becomes a global element plus a complex type that
extends the complex type of its base class, so the Java inheritance chain
is mirrored as XSD type derivation.
"""

import logging
from typing import List, Optional, Set

from core.sdk_model import Styleable, TypeInformation
from gen.xsd.writer import XsdWriter
from meta import DEFAULT_META, MetaBundle
from sdk_types import SchemaName

logger = logging.getLogger(__name__)

_ANDROID = DEFAULT_META.android


def schema_type_name(class_name: Optional[str]) -> Optional[SchemaName]:
    """Element name for a fully qualified class name.

    "android.widget.Button" -> "Button";
    "android.widget.LinearLayout.LayoutParams" -> "LinearLayout.LayoutParams".
    Nested classes written as Outer$Inner are read as Outer.Inner first.
    Only a nested LayoutParams keeps its outer class
    ("android.view.ViewGroup$LayoutParams" -> "ViewGroup.LayoutParams");
    any other nested class loses it
    ("android.view.ViewGroup$MarginLayoutParams" -> "MarginLayoutParams").
    """
    if class_name is None:
        return None
    suffix = _ANDROID.layout_params_suffix
    class_name = class_name.replace(_ANDROID.nested_class_separator, ".")
    is_layout_params = class_name.endswith(suffix)
    if is_layout_params:
        class_name = class_name[:-len(suffix)]
    local = class_name[class_name.rfind(".") + 1:]
    return SchemaName(local + suffix if is_layout_params else local)


class LayoutSchemaGenerator:
    def __init__(self, widgets: List[TypeInformation], styleables: List[Styleable],
                 meta: Optional[MetaBundle] = None,
                 attributes_schema_location: Optional[str] = None) -> None:
        self.widgets = widgets
        self.meta: MetaBundle = meta or DEFAULT_META
        self.xml = self.meta.xml
        self.android = self.meta.android
        self.attributes_schema_location = attributes_schema_location
        self._styleable_names: Set[str] = {s.name for s in styleables if s.name is not None}

    def type_qname(self, schema_name: Optional[str]) -> str:
        if schema_name is None:
            return self.xml.any_type
        return self.android.type_name(schema_name)

    def has_styleable(self, schema_name: str) -> bool:
        return schema_name in self._styleable_names

    def build(self, writer: Optional[XsdWriter] = None) -> XsdWriter:
        writer = writer or XsdWriter(self.xml)
        writer.start_doc()
        if self.attributes_schema_location is not None:
            writer.write_import(self.xml.android_ns, self.attributes_schema_location)

        emitted: Set[str] = set()
        linked = 0
        for info in self.widgets:
            name = schema_type_name(info.full_name)
            if name in emitted:
                logger.warning("Skipping %s: element name '%s' already declared", info.full_name, name)
                continue
            emitted.add(name)
            if self._write_type(writer, name, schema_type_name(info.base_type_name)):
                linked += 1
        writer.end_doc()
        logger.info("Layout schema: %d element types, %d linked to styleables", len(emitted), linked)
        return writer

    def generate(self, out_path: str, pretty: bool = True) -> None:
        self.build().save(out_path, pretty=pretty)
        logger.info("Written %s", out_path)

    def _write_type(self, writer: XsdWriter, name: SchemaName, base: Optional[SchemaName]) -> bool:
        type_name = self.type_qname(name)
        writer.write_element(name, type_name)
        writer.start_complex_type(type_name, self.type_qname(base))
        linked = self.has_styleable(name)
        if linked:
            writer.write_attribute_group_ref(self.xml.android_qname(name))
        writer.end_complex_type()
        return linked


__all__ = ["LayoutSchemaGenerator", "schema_type_name"]
