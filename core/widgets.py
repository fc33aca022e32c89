"""Parser for the platform's data/widgets.txt.

Each line starts with a one-letter role code followed by a space separated
class chain, most derived first:

    Wandroid.widget.Button android.widget.TextView android.view.View java.lang.Object
"""

import logging
from typing import Dict, Iterable, List, Optional

from core.sdk_model import TypeInformation
from meta import DEFAULT_META
from sdk_types import ClassName, ViewKind

logger = logging.getLogger(__name__)

ROOT_OBJECT_TYPE: str = DEFAULT_META.android.root_object_type


def view_kind_from_code(code: str) -> ViewKind:
    return ViewKind.from_code(code)


def _base_or_none(name: str) -> Optional[ClassName]:
    return None if name == ROOT_OBJECT_TYPE else ClassName(name)


def parse_widget_lines(lines: Iterable[str]) -> List[TypeInformation]:
    types: Dict[str, TypeInformation] = {}
    for line in lines:
        line = line.rstrip("\r\n")
        if not line:
            continue
        kind = view_kind_from_code(line[0])
        items = line[1:].split()
        for current, parent in zip(items, items[1:]):
            # The rest of this chain was registered with the earlier entry.
            if current in types:
                break
            types[current] = TypeInformation(
                full_name=ClassName(current),
                base_type_name=_base_or_none(parent),
                kind=kind,
            )
    return list(types.values())


def load_widgets(path: str) -> List[TypeInformation]:
    with open(path, "r", encoding="utf-8") as f:
        widgets = parse_widget_lines(f)
    logger.info("Loaded %d widget types from %s", len(widgets), path)
    return widgets


__all__ = ["view_kind_from_code", "parse_widget_lines", "load_widgets"]
