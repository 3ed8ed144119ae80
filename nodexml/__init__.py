"""Serialize element/text node trees into XML documents."""

from .errors import MissingNameError
from .xml_builder import (
    XML_DECLARATION,
    BuiltDocument,
    XmlBuilder,
    build,
    build_document,
    escape_xml,
)
from .xml_model import XmlElement, XmlNode, XmlText, to_node

__version__ = "0.1.0"

__all__ = [
    "BuiltDocument",
    "MissingNameError",
    "XML_DECLARATION",
    "XmlBuilder",
    "XmlElement",
    "XmlNode",
    "XmlText",
    "build",
    "build_document",
    "escape_xml",
    "to_node",
]
