import pytest

from website_compressor.compressors.jsscan import JavaScriptSyntaxError, tokenize


def significant(source):
    return [(token.kind, token.text) for token in tokenize(source) if token.significant]


def test_tokens_keep_positions():
    tokens = [token for token in tokenize("var a = 1;\n  b('x');") if token.significant]
    b = tokens[5]
    assert (b.text, b.line, b.column) == ("b", 2, 3)
    assert tokens[7].kind == "string"


def test_regex_after_operator_division_after_operand():
    assert ("regex", "/ab+c/g") in significant("x = /ab+c/g.test(y)")
    assert all(kind != "regex" for kind, _ in significant("a = b / c / d"))
    assert ("regex", "/[/]/") in significant("return /[/]/")


def test_template_with_nested_braces_is_one_token():
    assert significant("`a${ {b: 1}.b }c`") == [("template", "`a${ {b: 1}.b }c`")]


def test_comments_are_not_significant():
    assert significant("a // b\n/* c */ d") == [("name", "a"), ("name", "d")]


def test_optional_chaining_versus_conditional():
    assert ("punct", "?.") in significant("a?.b")
    assert ("punct", "?.") not in significant("a?.5:1")


@pytest.mark.parametrize("source,message,line,column", [
    ("var a = 'abc\n", "unterminated string literal", 1, 9),
    ("a;\n/* x", "unterminated comment", 2, 1),
    ("x = `abc", "unterminated template literal", 1, 5),
    ("x = /abc\n", "unterminated regular expression literal", 1, 5),
])
def test_unterminated_literals(source, message, line, column):
    with pytest.raises(JavaScriptSyntaxError) as excinfo:
        tokenize(source)
    assert excinfo.value.message == message
    assert (excinfo.value.line, excinfo.value.column) == (line, column)


@pytest.mark.parametrize("source", ["x = i++ / 2", "a-- / b", "y = arr[0]++ / 2 / 3"])
def test_division_after_postfix_operator(source):
    assert all(kind != "regex" for kind, _ in significant(source))


def test_regex_after_prefix_operator_position():
    assert ("regex", "/a/") in significant("x = ++/a/.lastIndex")
