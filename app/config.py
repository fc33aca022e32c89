from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class GeneratorConfig:
    # Output settings
    output_directory: str = "generated"
    layout_file: str = "android-layout.xsd"          # default namespace schema
    attributes_file: str = "android-attributes.xsd"  # android namespace schema

    # Processing settings
    pretty_print: bool = True
    # Emit <xs:import> of the android namespace in the layout schema so that
    # attribute group references resolve when the schema is compiled.
    import_attributes_schema: bool = True

    @property
    def layout_path(self) -> str:
        return os.path.join(self.output_directory, self.layout_file)

    @property
    def attributes_path(self) -> str:
        return os.path.join(self.output_directory, self.attributes_file)


DEFAULT_CONFIG = GeneratorConfig()

__all__ = [
    "GeneratorConfig",
    "DEFAULT_CONFIG",
]
