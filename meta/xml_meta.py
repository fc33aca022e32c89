from dataclasses import dataclass
from typing import Dict, Optional

Namespace = str
QNameString = str


@dataclass
class XsdMetaModel:
    xs_ns: Namespace = "http://www.w3.org/2001/XMLSchema"
    android_ns: Namespace = "http://schemas.android.com/apk/res/android"
    xs_prefix: str = "xs"
    android_prefix: str = "android"

    def xs(self, tag: str) -> str:
        """Clark-notation tag in the XML Schema namespace."""
        return f"{{{self.xs_ns}}}{tag}"

    def xs_qname(self, local: str) -> QNameString:
        return f"{self.xs_prefix}:{local}"

    def android_qname(self, local: str) -> QNameString:
        return f"{self.android_prefix}:{local}"

    @property
    def any_type(self) -> QNameString:
        return self.xs_qname("anyType")

    @property
    def string_type(self) -> QNameString:
        return self.xs_qname("string")

    @property
    def nsmap(self) -> Dict[Optional[str], Namespace]:
        return {self.xs_prefix: self.xs_ns, self.android_prefix: self.android_ns}
