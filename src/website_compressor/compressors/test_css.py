from website_compressor.compressors.css import CssCompressor
from website_compressor.models.config import Configuration

STYLESHEET = """\
/*! keep me */
a {
    color: red;
}

/* drop me */
b { margin: 0 }
"""


def test_compress_removes_whitespace_and_comments():
    result = CssCompressor(Configuration()).compress(STYLESHEET)
    assert "/*! keep me */" in result
    assert "drop me" not in result
    assert "a{color:red" in result
    assert "b{margin:0" in result


def test_line_break_zero_breaks_after_every_rule():
    result = CssCompressor(Configuration(line_break=0)).compress("a { color: red }\nb { margin: 0 }")
    assert result.count("\n") == 1
    first, second = result.split("\n")
    assert first.startswith("a{") and first.endswith("}")
    assert second.startswith("b{")


def test_line_break_waits_for_column():
    result = CssCompressor(Configuration(line_break=8)).compress("a{b:c}d{e:f}g{h:i}")
    assert result == "a{b:c}d{e:f}\ng{h:i}"


def test_line_break_ignores_braces_in_strings():
    result = CssCompressor(Configuration(line_break=0)).compress('a{content:"}"}b{c:d}')
    assert result == 'a{content:"}"}\nb{c:d}'


def test_no_trailing_newline():
    assert CssCompressor(Configuration(line_break=0)).compress("a { b: c }") == "a{b:c}"
