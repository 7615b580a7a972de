import pytest

from website_compressor.compressors.css import CssCompressor
from website_compressor.compressors.html import HtmlCompressor
from website_compressor.compressors.javascript import JavaScriptCompressor
from website_compressor.compressors.registry import ContentType, content_type_for, create_compressor, file_extension
from website_compressor.compressors.xml import XmlCompressor
from website_compressor.compressors.base import ConsoleReporter, format_diagnostic
from website_compressor.models.config import Configuration


@pytest.mark.parametrize("name,extension", [
    ("a.css", "css"),
    ("a.b.JS", "JS"),
    (".css", None),
    ("a.", None),
    ("noext", None),
])
def test_file_extension(name, extension):
    assert file_extension(name) == extension


@pytest.mark.parametrize("name,content_type", [
    ("style.CSS", ContentType.CSS),
    ("index.Html", ContentType.HTML),
    ("app.js", ContentType.JS),
    ("feed.XmL", ContentType.XML),
    ("notes.txt", None),
    ("index.htm", None),
    ("Makefile", None),
])
def test_content_type_for(name, content_type):
    assert content_type_for(name) is content_type


@pytest.mark.parametrize("content_type,cls", [
    (ContentType.CSS, CssCompressor),
    (ContentType.HTML, HtmlCompressor),
    (ContentType.JS, JavaScriptCompressor),
    (ContentType.XML, XmlCompressor),
])
def test_create_compressor(content_type, cls):
    reporter = ConsoleReporter()
    compressor = create_compressor(content_type, Configuration(), reporter)
    assert isinstance(compressor, cls)


def test_format_diagnostic():
    assert format_diagnostic("WARNING", "careful", 3, 7) == "[WARNING] 3:7:careful"
    assert format_diagnostic("ERROR", "broken", None, None) == "[ERROR] broken"
