"""Map file extensions to compressors."""

import importlib
import logging
from enum import Enum
from typing import Optional

from website_compressor.compressors.base import Compressor, DiagnosticReporter
from website_compressor.models.config import Configuration

logger = logging.getLogger(__name__)


class ContentType(str, Enum):
    """Content types recognized by file extension."""
    CSS = "css"
    HTML = "html"
    JS = "js"
    XML = "xml"


# Imported on first use so that a missing minifier library only matters for
# the file types actually present.
COMPRESSOR_CLASSES = {
    ContentType.CSS: "website_compressor.compressors.css:CssCompressor",
    ContentType.HTML: "website_compressor.compressors.html:HtmlCompressor",
    ContentType.JS: "website_compressor.compressors.javascript:JavaScriptCompressor",
    ContentType.XML: "website_compressor.compressors.xml:XmlCompressor",
}

NEEDS_REPORTER = frozenset([ContentType.HTML, ContentType.JS])


def file_extension(name: str) -> Optional[str]:
    """Return the text after the last dot, unless the dot starts or ends the name."""
    index = name.rfind(".")
    if index <= 0 or index + 1 >= len(name):
        return None
    return name[index + 1:]


def content_type_for(name: str) -> Optional[ContentType]:
    extension = file_extension(name)
    if extension is None:
        return None
    try:
        return ContentType(extension.lower())
    except ValueError:
        return None


def create_compressor(content_type: ContentType, config: Configuration, reporter: DiagnosticReporter) -> Compressor:
    module_name, class_name = COMPRESSOR_CLASSES[content_type].split(":")
    cls = getattr(importlib.import_module(module_name), class_name)
    logger.debug(f"Creating {class_name} for .{content_type.value} files")
    if content_type in NEEDS_REPORTER:
        return cls(config, reporter)
    return cls(config)
