from dataclasses import dataclass
from .xml_meta import XsdMetaModel
from .android_meta import AndroidMetaModel


@dataclass
class MetaBundle:
    xml: XsdMetaModel
    android: AndroidMetaModel


DEFAULT_META = MetaBundle(xml=XsdMetaModel(), android=AndroidMetaModel())
