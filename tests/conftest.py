import os
import sys
from pathlib import Path

import pytest

# Ensure project root is first on sys.path so local packages like `core` are used
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


ATTRS_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <!-- attributes declared outside of any styleable -->
    <attr name="textColor" format="color" />
    <attr name="layout_width" format="dimension">
        <enum name="fill_parent" value="-1" />
        <enum name="match_parent" value="-1" />
        <enum name="wrap_content" value="-2" />
    </attr>
    <declare-styleable name="View">
        <attr name="id" format="reference" />
        <attr name="visibility">
            <enum name="visible" value="0" />
            <enum name="invisible" value="1" />
            <enum name="gone" value="2" />
        </attr>
    </declare-styleable>
    <declare-styleable name="TextView">
        <attr name="textColor" />
        <attr name="text" format="string" />
        <attr name="gravity">
            <flag name="top" value="0x30" />
            <flag name="bottom" value="0x50" />
        </attr>
    </declare-styleable>
    <declare-styleable name="LinearLayout">
        <attr name="orientation" format="enum">
            <enum name="horizontal" value="0" />
            <enum name="vertical" value="1" />
        </attr>
        <attr name="gravity" />
        <attr name="baselineAligned" format="boolean" />
    </declare-styleable>
    <declare-styleable name="LinearLayout_Layout">
        <attr name="layout_width" />
        <attr name="layout_weight" format="float" />
    </declare-styleable>
</resources>
"""

WIDGETS_TXT = """Wandroid.view.View java.lang.Object
Wandroid.widget.TextView android.view.View java.lang.Object
Wandroid.widget.Button android.widget.TextView android.view.View java.lang.Object
Landroid.widget.LinearLayout android.view.ViewGroup android.view.View java.lang.Object
Landroid.view.ViewGroup android.view.View java.lang.Object
Pandroid.widget.LinearLayout$LayoutParams android.view.ViewGroup$MarginLayoutParams android.view.ViewGroup$LayoutParams java.lang.Object
"""

MAVEN_METADATA_XML = """<?xml version="1.0" encoding="UTF-8"?>
<metadata>
  <groupId>com.android.support</groupId>
  <artifactId>{artifact}</artifactId>
  <versioning>
    {release}
    <versions>
      <version>1.0.0</version>
      <version>1.1.0</version>
    </versions>
  </versioning>
</metadata>
"""


def make_platform(home: Path, level: str, with_jar: bool = True, with_res: bool = True) -> Path:
    platform = home / "platforms" / f"android-{level}"
    platform.mkdir(parents=True)
    if with_jar:
        (platform / "android.jar").write_bytes(b"")
    if with_res:
        (platform / "data" / "res").mkdir(parents=True)
    return platform


def write_platform_data(platform: Path, attrs: str = ATTRS_XML, widgets: str = WIDGETS_TXT) -> None:
    values = platform / "data" / "res" / "values"
    values.mkdir(parents=True, exist_ok=True)
    (values / "attrs.xml").write_text(attrs, encoding="utf-8")
    (platform / "data" / "widgets.txt").write_text(widgets, encoding="utf-8")


@pytest.fixture
def sdk_home(tmp_path: Path) -> Path:
    """A minimal SDK tree: two usable platforms, one incomplete one and two extras."""
    home = tmp_path / "sdk"
    make_platform(home, "9")
    write_platform_data(make_platform(home, "33"))
    make_platform(home, "34", with_jar=False)
    make_platform(home, "preview")

    support = home / "extras" / "android" / "m2repository" / "com" / "android" / "support" / "appcompat"
    support.mkdir(parents=True)
    (support / "maven-metadata.xml").write_text(
        MAVEN_METADATA_XML.format(artifact="appcompat", release="<release>1.1.0</release>"),
        encoding="utf-8")
    design = home / "extras" / "android" / "m2repository" / "com" / "android" / "support" / "design"
    design.mkdir(parents=True)
    (design / "maven-metadata.xml").write_text(
        MAVEN_METADATA_XML.format(artifact="design", release=""), encoding="utf-8")
    return home


@pytest.fixture
def attrs_path(tmp_path: Path) -> Path:
    path = tmp_path / "attrs.xml"
    path.write_text(ATTRS_XML, encoding="utf-8")
    return path


@pytest.fixture
def widgets_path(tmp_path: Path) -> Path:
    path = tmp_path / "widgets.txt"
    path.write_text(WIDGETS_TXT, encoding="utf-8")
    return path


@pytest.fixture
def platform_factory():
    return make_platform


@pytest.fixture
def maven_metadata():
    return MAVEN_METADATA_XML
