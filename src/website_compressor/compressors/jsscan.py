"""Lexical scanner for JavaScript source.

Only splits the text into tokens with their positions; it does not parse.
Used to report problems in the source before minification and to run token
level passes over the minified output.
"""

import re
from dataclasses import dataclass

WHITESPACE = re.compile(r"[\s\ufeff]+")
NAME = re.compile(r"[#A-Za-z_$\u0080-\uffff][\w$\u0080-\uffff]*")
NUMBER = re.compile(
    r"0[xXoObB][\da-fA-F_]+n?"
    r"|(?:\d[\d_]*(?:\.[\d_]*)?|\.\d[\d_]*)(?:[eE][+-]?\d[\d_]*)?n?"
)
PUNCTUATORS = sorted(
    [
        ">>>=", "...", "===", "!==", "**=", "<<=", ">>=", ">>>", "&&=", "||=", "??=",
        "=>", "==", "!=", "<=", ">=", "&&", "||", "??", "?.", "++", "--", "+=", "-=",
        "*=", "/=", "%=", "&=", "|=", "^=", "<<", ">>", "**",
    ],
    key=len,
    reverse=True,
)

RESERVED_WORDS = frozenset("""
    abstract await boolean break byte case catch char class const continue debugger
    default delete do double else enum export extends false final finally float for
    function goto if implements import in instanceof int interface let long native new
    null package private protected public return short static super switch synchronized
    this throw throws transient true try typeof var void volatile while with yield
""".split())

# A slash after one of these starts a regular expression rather than a division.
REGEX_AFTER_KEYWORDS = frozenset(
    "await case delete do else in instanceof new return throw typeof void yield".split()
)


class JavaScriptSyntaxError(ValueError):
    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"{message} at {line}:{column}")
        self.message = message
        self.line = line
        self.column = column


@dataclass
class Token:
    kind: str  # whitespace, comment, string, template, regex, number, name, punct
    text: str
    line: int
    column: int

    @property
    def significant(self) -> bool:
        return self.kind not in ("whitespace", "comment")


def _ends_operand(token: Token | None) -> bool:
    if token is None:
        return False
    if token.kind == "name":
        return token.text not in REGEX_AFTER_KEYWORDS
    if token.kind == "punct":
        return token.text in (")", "]", "}")
    return token.kind in ("number", "string", "template", "regex")


def _regex_allowed(previous: Token | None, before: Token | None = None) -> bool:
    """Tell whether a `/` after `previous` starts a regular expression.

    `++` and `--` are postfix when they follow an operand, so `before`, the
    token ahead of them, decides.
    """
    if previous is not None and previous.kind == "punct" and previous.text in ("++", "--"):
        return not _ends_operand(before)
    return not _ends_operand(previous)


class Scanner:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.line_start = 0

    def fail(self, message: str, pos: int):
        line = self.source.count("\n", 0, pos) + 1
        column = pos - (self.source.rfind("\n", 0, pos) + 1) + 1
        raise JavaScriptSyntaxError(message, line, column)

    def _skip_string(self, start: int) -> int:
        quote = self.source[start]
        i = start + 1
        n = len(self.source)
        while i < n:
            ch = self.source[i]
            if ch == "\\":
                i += 3 if self.source.startswith("\r\n", i + 1) else 2
                continue
            if ch == quote:
                return i + 1
            if ch in "\r\n":
                break
            i += 1
        self.fail("unterminated string literal", start)

    def _skip_template(self, start: int) -> int:
        i = start + 1
        n = len(self.source)
        while i < n:
            ch = self.source[i]
            if ch == "\\":
                i += 2
            elif ch == "`":
                return i + 1
            elif self.source.startswith("${", i):
                i = self._skip_substitution(i + 2)
            else:
                i += 1
        self.fail("unterminated template literal", start)

    def _skip_substitution(self, i: int) -> int:
        depth = 1
        n = len(self.source)
        while i < n:
            ch = self.source[i]
            if ch in "\"'":
                i = self._skip_string(i)
                continue
            if ch == "`":
                i = self._skip_template(i)
                continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return i + 1
            i += 1
        return n

    def _skip_regex(self, start: int) -> int:
        i = start + 1
        n = len(self.source)
        in_class = False
        while i < n:
            ch = self.source[i]
            if ch == "\\":
                i += 2
                continue
            if ch in "\r\n":
                break
            if in_class:
                if ch == "]":
                    in_class = False
            elif ch == "[":
                in_class = True
            elif ch == "/":
                i += 1
                while i < n and (self.source[i].isalnum() or self.source[i] in "_$"):
                    i += 1
                return i
            i += 1
        self.fail("unterminated regular expression literal", start)

    def _next_end(self, previous: Token | None, before: Token | None) -> tuple[str, int]:
        src = self.source
        i = self.pos
        ch = src[i]

        match = WHITESPACE.match(src, i)
        if match:
            return "whitespace", match.end()
        if src.startswith("//", i):
            end = src.find("\n", i)
            return "comment", len(src) if end < 0 else end
        if src.startswith("/*", i):
            end = src.find("*/", i + 2)
            if end < 0:
                self.fail("unterminated comment", i)
            return "comment", end + 2
        if ch in "\"'":
            return "string", self._skip_string(i)
        if ch == "`":
            return "template", self._skip_template(i)
        if ch == "/" and _regex_allowed(previous, before):
            return "regex", self._skip_regex(i)
        match = NUMBER.match(src, i)
        if match:
            return "number", match.end()
        match = NAME.match(src, i)
        if match:
            return "name", match.end()
        for punct in PUNCTUATORS:
            if src.startswith(punct, i):
                # a?.5:1 is a conditional, not optional chaining
                if punct == "?." and src[i + 2:i + 3].isdigit():
                    continue
                return "punct", i + len(punct)
        return "punct", i + 1

    def tokens(self):
        previous = None
        before = None
        n = len(self.source)
        while self.pos < n:
            kind, end = self._next_end(previous, before)
            text = self.source[self.pos:end]
            token = Token(kind, text, self.line, self.pos - self.line_start + 1)
            newlines = text.count("\n")
            if newlines:
                self.line += newlines
                self.line_start = self.pos + text.rfind("\n") + 1
            self.pos = end
            if token.significant:
                before, previous = previous, token
            yield token


def tokenize(source: str) -> list[Token]:
    """Split `source` into tokens, raising JavaScriptSyntaxError on unterminated literals."""
    return list(Scanner(source).tokens())
