"""JavaScript compression.

Scripts are minified by calmjs.parse, which also shortens local symbol names,
or by rjsmin when munging is off or the script is not ES5. Token passes then
apply the YUI-style options.
"""

import logging
import re

import rjsmin
from calmjs.parse import es5
from calmjs.parse.exceptions import ECMASyntaxError
from calmjs.parse.unparsers.es5 import minify_print

from website_compressor.compressors.base import Compressor, DiagnosticReporter
from website_compressor.compressors.jsscan import RESERVED_WORDS, JavaScriptSyntaxError, Token, tokenize
from website_compressor.models.config import Configuration

logger = logging.getLogger(__name__)

IDENTIFIER = re.compile(r"[A-Za-z_$][\w$]*")

EVAL_WARNING = "Using 'eval' is not recommended. Moreover, using 'eval' reduces the level of compression!"
WITH_WARNING = "Using 'with' is not recommended. Moreover, using 'with' reduces the level of compression!"

# Tokens after which `;}` must keep its semicolon: it may end an empty statement
# body (`if(a);}`) or follow a label (`a:;}`).
KEEP_SEMI_AFTER = frozenset([")", ":", "else", "do"])


def check_source(source: str, reporter: DiagnosticReporter) -> list[Token]:
    """Tokenize `source`, reporting warnings and fatal errors to `reporter`."""
    try:
        tokens = tokenize(source)
    except JavaScriptSyntaxError as e:
        reporter.error(e.message, e.line, e.column)
        raise

    significant = [token for token in tokens if token.significant]
    for index, token in enumerate(significant):
        if token.kind != "name" or token.text not in ("eval", "with"):
            continue
        previous = significant[index - 1] if index > 0 else None
        following = significant[index + 1] if index + 1 < len(significant) else None
        if previous is not None and previous.text in (".", "?."):
            continue
        if following is None or following.text != "(":
            continue
        reporter.warning(EVAL_WARNING if token.text == "eval" else WITH_WARNING, token.line, token.column)
    return tokens


def _is_property_name(token: Token) -> bool:
    if token.kind != "string" or "\\" in token.text:
        return False
    name = token.text[1:-1]
    return IDENTIFIER.fullmatch(name) is not None and name not in RESERVED_WORDS


def _can_be_accessed(token: Token | None) -> bool:
    if token is None:
        return False
    if token.kind == "name":
        return token.text not in RESERVED_WORDS or token.text in ("this", "super")
    return token.kind == "punct" and token.text in (")", "]")


def rewrite_tokens(
    script: str,
    optimize: bool = True,
    preserve_semi: bool = False,
    line_break: int = -1,
) -> str:
    """Run the post-minification passes over `script`.

    - optimize: `a["b"]` becomes `a.b` when `b` is a plain identifier.
    - preserve_semi: when false, a semicolon right before `}` is dropped.
    - line_break: when >= 0, a newline follows any `;` past that column.
    """
    tokens = tokenize(script)
    out = []
    line_length = 0
    previous = None
    i = 0
    n = len(tokens)

    def emit(text: str):
        nonlocal line_length
        out.append(text)
        if "\n" in text:
            line_length = len(text) - text.rfind("\n") - 1
        else:
            line_length += len(text)

    while i < n:
        token = tokens[i]
        if (
            optimize
            and token.text == "["
            and token.kind == "punct"
            and i + 2 < n
            and _can_be_accessed(previous)
            and _is_property_name(tokens[i + 1])
            and tokens[i + 2].kind == "punct"
            and tokens[i + 2].text == "]"
        ):
            emit("." + tokens[i + 1].text[1:-1])
            previous = tokens[i + 2]
            i += 3
            continue

        if token.kind == "punct" and token.text == ";":
            following = tokens[i + 1] if i + 1 < n else None
            if (
                not preserve_semi
                and following is not None
                and following.text == "}"
                and previous is not None
                and previous.text not in KEEP_SEMI_AFTER
            ):
                i += 1
                continue
            emit(token.text)
            if line_break >= 0 and line_length > line_break and following is not None and following.kind != "whitespace":
                emit("\n")
            previous = token
            i += 1
            continue

        emit(token.text)
        if token.significant:
            previous = token
        i += 1
    return "".join(out)


def license_comments(tokens: list[Token]) -> list[str]:
    return [token.text for token in tokens if token.kind == "comment" and token.text.startswith("/*!")]


class JavaScriptCompressor(Compressor):
    """Minify a script and report what the scanner finds on the way."""

    def __init__(self, config: Configuration, reporter: DiagnosticReporter):
        super().__init__(config)
        self.reporter = reporter

    def compress(self, text: str) -> str:
        tokens = check_source(text, self.reporter)
        result = None
        if self.config.munge:
            result = self._munge(text, tokens)
        if result is None:
            result = rjsmin.jsmin(text, keep_bang_comments=True)
        return rewrite_tokens(
            result,
            optimize=not self.config.disable_optimizations,
            preserve_semi=self.config.preserve_semi,
            line_break=self.config.line_break,
        )

    def _munge(self, text: str, tokens: list[Token]) -> str | None:
        """Minify with local symbols renamed, or return None when calmjs cannot parse `text`.

        /*! comments are moved to the top of the output.
        """
        try:
            tree = es5(text)
        except ECMASyntaxError as e:
            logger.info(f"Keeping local symbol names, not an ES5 script: {e}")
            return None
        minified = minify_print(tree, obfuscate=True, drop_semi=not self.config.preserve_semi)
        return "".join(comment + "\n" for comment in license_comments(tokens)) + minified
