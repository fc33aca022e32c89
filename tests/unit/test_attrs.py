#!/usr/bin/env python3
import pytest
from lxml import etree

from core.attrs import load_styleables, parse_attribute, parse_styleables


def _attr(xml: str):
    return parse_attribute(etree.fromstring(xml))


def test_attribute_without_format():
    attr = _attr('<attr name="textColor" />')
    assert attr.name == "textColor"
    assert attr.formats == ()
    assert attr.enumerations == ()


def test_attribute_formats_split_on_pipe():
    attr = _attr('<attr name="background" format="reference|color" />')
    assert [f.name for f in attr.formats] == ["reference", "color"]


def test_attribute_with_unknown_format_fails():
    with pytest.raises(ValueError, match="colour"):
        _attr('<attr name="tint" format="colour" />')


def test_flags_and_enums_in_document_order():
    attr = _attr(
        '<attr name="mixed">'
        '<enum name="a" value="0"/>'
        '<!-- comment -->'
        '<flag name="b" value="0x1"/>'
        '<enum name="c" value="2"/>'
        '</attr>'
    )
    assert [(e.name, e.value) for e in attr.enumerations] == [("a", "0"), ("b", "0x1"), ("c", "2")]


def test_named_styleables_first_then_global_group(attrs_path):
    styleables = load_styleables(str(attrs_path))
    assert [s.name for s in styleables] == ["View", "TextView", "LinearLayout", "LinearLayout_Layout", None]
    global_group = styleables[-1]
    assert [a.name for a in global_group.attributes] == ["textColor", "layout_width"]


def test_styleable_attributes_in_order(attrs_path):
    styleables = {s.name: s for s in load_styleables(str(attrs_path))}
    text_view = styleables["TextView"]
    assert [a.name for a in text_view.attributes] == ["textColor", "text", "gravity"]
    gravity = text_view.attributes[2]
    assert [e.name for e in gravity.enumerations] == ["top", "bottom"]


def test_document_without_styleables():
    styleables = parse_styleables(etree.fromstring('<resources/>'))
    assert len(styleables) == 1
    assert styleables[0].name is None
    assert styleables[0].attributes == ()


def test_wrong_root_element():
    with pytest.raises(ValueError, match="resources"):
        parse_styleables(etree.fromstring('<manifest/>'))


def test_malformed_document(tmp_path):
    path = tmp_path / "attrs.xml"
    path.write_text("<resources><attr name='x'></resources>", encoding="utf-8")
    with pytest.raises(etree.XMLSyntaxError):
        load_styleables(str(path))


def test_missing_document(tmp_path):
    with pytest.raises(OSError):
        load_styleables(str(tmp_path / "missing.xml"))


def test_attribute_without_name_is_rejected():
    root = etree.fromstring(
        '<resources><declare-styleable name="View"><attr format="color"/></declare-styleable></resources>')
    with pytest.raises(ValueError, match="<attr> without a name"):
        parse_styleables(root)


def test_styleable_without_name_is_rejected():
    root = etree.fromstring('<resources><declare-styleable><attr name="a"/></declare-styleable></resources>')
    with pytest.raises(ValueError, match="<declare-styleable> without a name"):
        parse_styleables(root)


def test_unnamed_attribute_error_names_file_and_line(tmp_path):
    path = tmp_path / "attrs.xml"
    path.write_text('<resources>\n  <attr name="a"/>\n  <attr format="color"/>\n</resources>\n',
                    encoding="utf-8")
    with pytest.raises(ValueError, match=r"attrs\.xml:3"):
        load_styleables(str(path))
