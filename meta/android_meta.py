from dataclasses import dataclass
from typing import Tuple


@dataclass
class AndroidMetaModel:
    root_object_type: str = "java.lang.Object"
    layout_params_suffix: str = ".LayoutParams"
    nested_class_separator: str = "$"
    type_name_suffix: str = "_Type"
    values_type_suffix: str = "_values"
    global_group_name: str = "__global__"
    enum_format: str = "enum"

    # Placeholder simple types; each is a plain xs:string restriction.
    primitive_types: Tuple[str, ...] = ("color", "reference", "dimension", "fraction")

    def type_name(self, schema_name: str) -> str:
        return schema_name + self.type_name_suffix

    def values_type_name(self, attribute_name: str) -> str:
        return attribute_name + self.values_type_suffix
