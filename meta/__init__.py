from .xml_meta import XsdMetaModel
from .android_meta import AndroidMetaModel
from .default_model import DEFAULT_META, MetaBundle

__all__ = [
    "XsdMetaModel",
    "AndroidMetaModel",
    "MetaBundle",
    "DEFAULT_META",
]
