"""XML compression through lxml."""

import re

from lxml import etree

from website_compressor.compressors.base import Compressor
from website_compressor.models.config import Configuration

XML_DECLARATION = re.compile(r"^\s*(<\?xml\s[^>]*\?>)")


def _serialize(node) -> str:
    return etree.tostring(node, encoding="unicode", with_tail=False)


class XmlCompressor(Compressor):
    """Re-serialize a document without comments and whitespace-only text nodes."""

    def __init__(self, config: Configuration):
        super().__init__(config)
        self.remove_comments = not config.preserve_comments
        self.remove_intertag_spaces = not config.preserve_intertag_spaces
        self.parser = etree.XMLParser(
            remove_comments=self.remove_comments,
            remove_blank_text=self.remove_intertag_spaces,
            strip_cdata=False,
            resolve_entities=False,
            no_network=True,
        )

    def compress(self, text: str) -> str:
        if not text.strip():
            return text

        # lxml refuses str input carrying an encoding declaration, and the
        # declaration has to survive unchanged anyway.
        declaration = ""
        match = XML_DECLARATION.match(text)
        if match:
            declaration = match.group(1)
            text = text[match.end():]

        root = etree.fromstring(text.strip(), parser=self.parser)
        separator = "" if self.remove_intertag_spaces else "\n"
        body = _serialize(root)

        # The doctype (with its internal subset) and anything before the root
        # only come out when the whole tree is serialized.
        prolog = ""
        tree = root.getroottree()
        if tree.docinfo.doctype or root.getprevious() is not None:
            document = etree.tostring(tree, encoding="unicode")
            prolog = document[:document.index(body)].rstrip("\n")

        parts = [part for part in (declaration, prolog, body) if part]
        parts.extend(_serialize(node) for node in root.itersiblings())
        return separator.join(parts)
