"""HTML compression through htmlmin.

htmlmin never touches pre, textarea, script and style content and keeps
conditional comments. The parser below adds the whitespace options htmlmin
lacks and hands embedded stylesheets and scripts to the CSS and JavaScript
compressors on request.
"""

import re
from typing import Optional

from htmlmin.parser import HTMLMinParser

from website_compressor.compressors.base import Compressor, DiagnosticReporter
from website_compressor.compressors.css import CssCompressor
from website_compressor.compressors.javascript import JavaScriptCompressor
from website_compressor.models.config import Configuration

# HTML space characters, as htmlmin defines them
ALL_SPACES = re.compile("^[\x20\x09\x0a\x0c\x0d]+$")
LINE_BREAK_RUN = re.compile("[\x20\x09\x0c]*[\x0a\x0d][\x20\x09\x0a\x0c\x0d]*")
INLINE_SPACES = re.compile("[\x20\x09\x0c]+")

EMBEDDED_TAGS = ("script", "style")
JAVASCRIPT_TYPES = frozenset([
    "",
    "module",
    "text/javascript",
    "application/javascript",
    "text/ecmascript",
    "application/ecmascript",
    "application/x-javascript",
])


class CompressingParser(HTMLMinParser):
    """htmlmin parser with YUI-style space handling and embedded CSS/JS compression."""

    def __init__(
        self,
        css_compressor: Optional[CssCompressor] = None,
        js_compressor: Optional[JavaScriptCompressor] = None,
        preserve_multi_spaces: bool = False,
        preserve_line_breaks: bool = False,
        **options,
    ):
        self.css_compressor = css_compressor
        self.js_compressor = js_compressor
        self.preserve_multi_spaces = preserve_multi_spaces
        self.preserve_line_breaks = preserve_line_breaks
        super().__init__(**options)

    def reset(self):
        super().reset()
        # (tag, type attribute, content chunks) of the open script or style element
        self._embedded = None

    def handle_starttag(self, tag, attrs):
        super().handle_starttag(tag, attrs)
        if tag in EMBEDDED_TAGS:
            script_type = dict(attrs).get("type") or ""
            self._embedded = (tag, script_type.strip().lower(), [])

    def handle_endtag(self, tag):
        if self._embedded is not None and tag == self._embedded[0]:
            self._data_buffer.append(self._compress_embedded(*self._embedded))
            self._embedded = None
        super().handle_endtag(tag)

    def handle_data(self, data):
        if self._embedded is not None:
            self._embedded[2].append(data)
        elif self._in_pre_tag > 0 or not (self.preserve_multi_spaces or self.preserve_line_breaks):
            super().handle_data(data)
        elif self.remove_all_empty_space and ALL_SPACES.match(data) and not self._keeps_line_break(data):
            return
        else:
            self._data_buffer.append(self._collapse(data))

    def _keeps_line_break(self, data: str) -> bool:
        return self.preserve_line_breaks and LINE_BREAK_RUN.search(data) is not None

    def _collapse(self, data: str) -> str:
        if self.preserve_line_breaks:
            data = LINE_BREAK_RUN.sub("\n", data)
        if not self.preserve_multi_spaces:
            data = INLINE_SPACES.sub(" ", data)
        return data

    def _compress_embedded(self, tag: str, script_type: str, chunks: list[str]) -> str:
        content = "".join(chunks)
        if not content.strip():
            return content
        if tag == "style" and self.css_compressor is not None:
            return self.css_compressor.compress(content)
        if tag == "script" and self.js_compressor is not None and script_type in JAVASCRIPT_TYPES:
            return self.js_compressor.compress(content)
        return content


class HtmlCompressor(Compressor):
    def __init__(self, config: Configuration, reporter: DiagnosticReporter):
        super().__init__(config)
        self.css_compressor: Optional[CssCompressor] = CssCompressor(config) if config.compress_css else None
        self.js_compressor: Optional[JavaScriptCompressor] = (
            JavaScriptCompressor(config, reporter) if config.compress_js else None
        )

    def compress(self, text: str) -> str:
        parser = CompressingParser(
            css_compressor=self.css_compressor,
            js_compressor=self.js_compressor,
            preserve_multi_spaces=self.config.preserve_multi_spaces,
            preserve_line_breaks=self.config.preserve_line_breaks,
            remove_comments=not self.config.preserve_comments,
            remove_all_empty_space=not self.config.preserve_intertag_spaces,
            remove_optional_attribute_quotes=not self.config.preserve_quotes,
        )
        parser.feed(text)
        parser.close()
        return parser.result.strip()
