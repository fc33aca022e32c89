from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from sdk_types import (
    ViewKind, ClassName, AttributeName, StyleableName, FormatName, QNameString
)


# ---------- Attribute formats ----------
@dataclass(frozen=True)
class AttributeFormat:
    name: FormatName
    xsd_type: Optional[QNameString]  # None for formats without a direct XSD type

    @staticmethod
    def get(name: str) -> "AttributeFormat":
        fmt = FORMATS.get(name)
        if fmt is None:
            raise ValueError(f"Unexpected format name was requested: {name}")
        return fmt

    @staticmethod
    def parse(names: Optional[str]) -> List["AttributeFormat"]:
        """Resolve a '|'-separated format list such as "reference|color"."""
        if names is None:
            return []
        return [AttributeFormat.get(name) for name in names.split("|")]


FORMATS: Dict[str, AttributeFormat] = {
    fmt.name: fmt
    for fmt in (
        AttributeFormat(FormatName("boolean"), QNameString("xs:boolean")),
        AttributeFormat(FormatName("color"), QNameString("android:color")),
        AttributeFormat(FormatName("dimension"), QNameString("android:dimension")),
        AttributeFormat(FormatName("enum"), None),
        AttributeFormat(FormatName("float"), QNameString("xs:float")),
        AttributeFormat(FormatName("fraction"), QNameString("android:fraction")),
        AttributeFormat(FormatName("integer"), QNameString("xs:integer")),
        AttributeFormat(FormatName("reference"), QNameString("android:reference")),
        AttributeFormat(FormatName("string"), QNameString("xs:string")),
    )
}


# ---------- attrs.xml structures ----------
@dataclass(frozen=True)
class AttributeValueEnumeration:
    name: Optional[str]
    value: Optional[str]  # integer or flag encoding, not projected into the schema


@dataclass(frozen=True)
class Attribute:
    name: AttributeName
    formats: Tuple[AttributeFormat, ...] = ()
    enumerations: Tuple[AttributeValueEnumeration, ...] = ()

    @property
    def primary_format(self) -> Optional[AttributeFormat]:
        return self.formats[0] if self.formats else None

    @property
    def has_enumerations(self) -> bool:
        return bool(self.enumerations)


@dataclass(frozen=True)
class Styleable:
    name: Optional[StyleableName]  # None for the attributes declared outside any styleable
    attributes: Tuple[Attribute, ...] = field(default_factory=tuple)

    @property
    def is_global(self) -> bool:
        return self.name is None


# ---------- widgets.txt structures ----------
@dataclass(frozen=True)
class TypeInformation:
    full_name: ClassName
    base_type_name: Optional[ClassName]  # None: extends the implicit root type
    kind: ViewKind = ViewKind.TO_BE_DETERMINED


__all__ = [
    "AttributeFormat", "FORMATS",
    "AttributeValueEnumeration", "Attribute", "Styleable",
    "TypeInformation",
]
