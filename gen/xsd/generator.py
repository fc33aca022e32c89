#!/usr/bin/env python3
"""
Schema generator for the Android schema generator project.
Writes android-attributes.xsd and android-layout.xsd from a loaded SDK.
"""

import logging
import os
from typing import Optional

from app.config import GeneratorConfig, DEFAULT_CONFIG
from core.sdk_structure import AndroidSdkStructure
from gen.xsd.attributes import AndroidAttributesSchemaGenerator
from gen.xsd.layout import LayoutSchemaGenerator
from meta import DEFAULT_META, MetaBundle
from utils.xml import ensure_directory

logger = logging.getLogger(__name__)


class SchemaGenerator:
    def __init__(self, config: Optional[GeneratorConfig] = None, meta: Optional[MetaBundle] = None) -> None:
        self.config: GeneratorConfig = config or DEFAULT_CONFIG
        self.meta: MetaBundle = meta or DEFAULT_META

    def generate(self, sdk: AndroidSdkStructure, output_directory: Optional[str] = None) -> None:
        output_directory = output_directory or self.config.output_directory
        self.generate_files(
            sdk,
            os.path.join(output_directory, self.config.layout_file),
            os.path.join(output_directory, self.config.attributes_file),
        )

    def generate_files(self, sdk: AndroidSdkStructure, default_namespace_file: str,
                       android_namespace_file: str) -> None:
        for path in (default_namespace_file, android_namespace_file):
            ensure_directory(os.path.dirname(os.path.abspath(path)))

        AndroidAttributesSchemaGenerator(sdk.declared_styleables, self.meta).generate(
            android_namespace_file, pretty=self.config.pretty_print)

        location: Optional[str] = None
        if self.config.import_attributes_schema:
            location = os.path.relpath(
                os.path.abspath(android_namespace_file),
                os.path.dirname(os.path.abspath(default_namespace_file)),
            ).replace(os.sep, "/")
        LayoutSchemaGenerator(sdk.widgets, sdk.declared_styleables, self.meta,
                              attributes_schema_location=location).generate(
            default_namespace_file, pretty=self.config.pretty_print)


__all__ = ["SchemaGenerator"]
