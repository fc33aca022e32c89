#!/usr/bin/env python3
"""
Android SDK layout discovery.

Locates the newest usable platform under <sdk>/platforms, the extra
libraries under <sdk>/extras, and loads the widget hierarchy and styleables
of that platform.
"""

import glob
import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from lxml import etree

from core.attrs import load_styleables
from core.sdk_model import Styleable, TypeInformation
from core.widgets import load_widgets

logger = logging.getLogger(__name__)

PLATFORM_PREFIX = "android-"
MAVEN_METADATA = "maven-metadata.xml"


def _api_level_sort_key(level: str) -> int:
    try:
        return int(level)
    except ValueError:
        return -1


def find_latest_platform(home: str) -> Optional[str]:
    """Return the platforms/android-* directory with the highest API level, if any.

    Only directories holding both android.jar and data/res qualify.
    """
    candidates = [
        d for d in glob.glob(os.path.join(home, "platforms", PLATFORM_PREFIX + "*"))
        if os.path.isfile(os.path.join(d, "android.jar"))
        and os.path.isdir(os.path.join(d, "data", "res"))
    ]
    if not candidates:
        return None
    levels = sorted(
        (os.path.basename(d)[len(PLATFORM_PREFIX):] for d in candidates),
        key=_api_level_sort_key,
    )
    return os.path.join(home, "platforms", PLATFORM_PREFIX + levels[-1])


def release_version_from_maven_metadata(path: str) -> str:
    root = etree.parse(path).getroot()
    if root.tag != "metadata":
        raise ValueError(f"Not a maven metadata file: {path}")
    versioning = root.find("versioning")
    if versioning is None:
        raise ValueError(f"Maven metadata without <versioning>: {path}")
    release = versioning.find("release")
    if release is not None:
        return (release.text or "").strip()
    versions = versioning.findall("versions/version")
    if not versions:
        raise ValueError(f"Maven metadata lists no release or version: {path}")
    return (versions[-1].text or "").strip()


def find_extra_libraries(home: str) -> List[str]:
    """Version specific directories of every maven-style library under <sdk>/extras."""
    extras = os.path.join(home, "extras")
    if not os.path.isdir(extras):
        return []
    found: List[str] = []
    for dirpath, dirnames, filenames in os.walk(extras):
        dirnames.sort()
        if dirpath == extras:
            continue
        if MAVEN_METADATA in filenames:
            version = release_version_from_maven_metadata(os.path.join(dirpath, MAVEN_METADATA))
            found.append(os.path.join(dirpath, version))
    return found


@dataclass
class AndroidSdkStructure:
    home: str
    latest_platform: str
    extra_libraries: List[str] = field(default_factory=list)
    widgets: List[TypeInformation] = field(default_factory=list)
    declared_styleables: List[Styleable] = field(default_factory=list)

    @property
    def api_level(self) -> str:
        return os.path.basename(self.latest_platform)[len(PLATFORM_PREFIX):]

    @property
    def android_jar(self) -> str:
        return os.path.join(self.latest_platform, "android.jar")

    @property
    def data_dir(self) -> str:
        return os.path.join(self.latest_platform, "data")

    @property
    def widgets_txt(self) -> str:
        return os.path.join(self.data_dir, "widgets.txt")

    @property
    def res_dir(self) -> str:
        return os.path.join(self.data_dir, "res")

    @property
    def attrs_xml(self) -> str:
        return os.path.join(self.res_dir, "values", "attrs.xml")

    def find_styleable(self, name: Optional[str]) -> Optional[Styleable]:
        if name is None:
            return None
        return next((s for s in self.declared_styleables if s.name == name), None)

    @classmethod
    def from_sdk_home(cls, home: str) -> "AndroidSdkStructure":
        if not os.path.isdir(home):
            raise ValueError(f"Android SDK does not exist at the specified path: '{home}'")

        latest = find_latest_platform(home)
        if latest is None:
            raise ValueError(
                f"The specified directory '{home}' does not contain any Android SDK platform "
                "(which should contain 'android.jar' and 'data/res' subdirectory)."
            )
        sdk = cls(home=home, latest_platform=latest)
        logger.info("Using platform %s", latest)

        if not os.path.isfile(sdk.attrs_xml):
            raise ValueError(f"Attribute declarations not found in the platform: '{sdk.attrs_xml}'")

        sdk.extra_libraries = find_extra_libraries(home)
        sdk.widgets = load_widgets(sdk.widgets_txt)
        sdk.declared_styleables = load_styleables(sdk.attrs_xml)
        return sdk


__all__ = [
    "AndroidSdkStructure",
    "find_latest_platform",
    "find_extra_libraries",
    "release_version_from_maven_metadata",
]
