"""CSS compression through csscompressor, a port of the YUI stylesheet compressor."""

import csscompressor

from website_compressor.compressors.base import Compressor


class CssCompressor(Compressor):
    """Minify a stylesheet, keeping /*! ... */ comments."""

    def compress(self, text: str) -> str:
        # csscompressor treats 0 as "no breaks"; 1 breaks after every rule.
        max_linelen = max(self.config.line_break, 1) if self.config.line_break >= 0 else 0
        return csscompressor.compress(text, max_linelen=max_linelen)
