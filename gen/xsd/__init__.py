from .writer import XsdWriter
from .attributes import AndroidAttributesSchemaGenerator
from .layout import LayoutSchemaGenerator, schema_type_name
from .generator import SchemaGenerator

__all__ = [
    "XsdWriter",
    "AndroidAttributesSchemaGenerator",
    "LayoutSchemaGenerator",
    "schema_type_name",
    "SchemaGenerator",
]
