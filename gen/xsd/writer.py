from typing import Iterable, Optional
import logging
from lxml import etree

from meta import XsdMetaModel, DEFAULT_META
from sdk_types import ContextStack, ElementAttributes
from utils.xml import write_tree_atomic

# Setup logger
logger = logging.getLogger(__name__)


class XsdWriter:
    """Builds one xs:schema document through start_*/end_* calls.

    Elements are kept in memory so the document can be indented and written
    in one go once it is complete.
    """

    def __init__(self, xml_model: Optional[XsdMetaModel] = None) -> None:
        if xml_model is None:
            xml_model = DEFAULT_META.xml
        self.config: XsdMetaModel = xml_model
        self._ctx_stack: ContextStack = []
        self._root: Optional[etree._Element] = None
        self._item_count: int = 0

    @property
    def root(self) -> etree._Element:
        if self._root is None:
            raise RuntimeError("start_doc() has not been called")
        return self._root

    @property
    def item_count(self) -> int:
        """Number of top-level schema components written so far."""
        return self._item_count

    def _current(self) -> etree._Element:
        if not self._ctx_stack:
            raise RuntimeError("No open element to write into")
        return self._ctx_stack[-1]

    def _start(self, tag: str, attrs: Optional[ElementAttributes] = None) -> etree._Element:
        el = self._write(tag, attrs)
        self._ctx_stack.append(el)
        return el

    def _write(self, tag: str, attrs: Optional[ElementAttributes] = None) -> etree._Element:
        parent = self._current()
        if parent is self._root:
            self._item_count += 1
        return etree.SubElement(parent, self.config.xs(tag), attrib=attrs or {})

    def _end(self) -> None:
        self._ctx_stack.pop()

    # ---------- document ----------
    def start_doc(self, target_namespace: Optional[str] = None) -> None:
        attrs: ElementAttributes = {}
        if target_namespace:
            attrs["targetNamespace"] = target_namespace
        self._root = etree.Element(self.config.xs("schema"), attrib=attrs, nsmap=self.config.nsmap)
        self._ctx_stack = [self._root]
        self._item_count = 0

    def end_doc(self) -> None:
        """Close every element that is still open."""
        self._ctx_stack.clear()

    def write_import(self, namespace: str, schema_location: Optional[str] = None) -> None:
        attrs: ElementAttributes = {"namespace": namespace}
        if schema_location:
            attrs["schemaLocation"] = schema_location
        # imports are not schema components
        etree.SubElement(self._current(), self.config.xs("import"), attrib=attrs)

    def save(self, out_path: str, pretty: bool = True) -> None:
        if self._ctx_stack:
            logger.warning("Saving %s with %d unclosed element(s)", out_path, len(self._ctx_stack))
        write_tree_atomic(etree.ElementTree(self.root), out_path, pretty=pretty)
        logger.debug("Wrote %d schema components to %s", self._item_count, out_path)

    # ---------- simple types ----------
    def start_simple_type(self, name: Optional[str] = None) -> None:
        self._start("simpleType", {"name": name} if name else None)

    def end_simple_type(self) -> None:
        self._end()

    def write_restriction(self, base: str, enumerations: Iterable[str] = ()) -> None:
        self._start("restriction", {"base": base})
        for value in enumerations:
            self._write("enumeration", {"value": value})
        self._end()

    def write_list(self, item_type: str) -> None:
        self._write("list", {"itemType": item_type})

    def write_string_restriction_type(self, name: str, enumerations: Iterable[str] = ()) -> None:
        """Named simple type restricting xs:string, optionally to a closed value set."""
        self.start_simple_type(name)
        self.write_restriction(self.config.string_type, enumerations)
        self.end_simple_type()

    # ---------- attributes ----------
    def start_attribute(self, name: str, type_ref: Optional[str] = None) -> None:
        attrs: ElementAttributes = {"name": name}
        if type_ref:
            attrs["type"] = type_ref
        self._start("attribute", attrs)

    def end_attribute(self) -> None:
        self._end()

    def write_attribute(self, name: str, type_ref: Optional[str] = None) -> None:
        self.start_attribute(name, type_ref)
        self.end_attribute()

    def write_attribute_ref(self, ref: str) -> None:
        self._write("attribute", {"ref": ref})

    def start_attribute_group(self, name: str) -> None:
        self._start("attributeGroup", {"name": name})

    def end_attribute_group(self) -> None:
        self._end()

    def write_attribute_group_ref(self, ref: str) -> None:
        self._write("attributeGroup", {"ref": ref})

    # ---------- elements and complex types ----------
    def write_element(self, name: str, type_ref: str) -> None:
        self._write("element", {"name": name, "type": type_ref})

    def start_complex_type(self, name: str, base: str) -> None:
        """Open <complexType name><complexContent><extension base>; closed by end_complex_type()."""
        self._start("complexType", {"name": name})
        self._start("complexContent")
        self._start("extension", {"base": base})

    def end_complex_type(self) -> None:
        self._end()  # extension
        self._end()  # complexContent
        self._end()  # complexType


__all__ = ["XsdWriter"]
