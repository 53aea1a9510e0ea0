import pytest

from sexpa.reader.tokenizer import Token, tokenize


def texts(source):
    return [t.text for t in tokenize(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", ["(", "+", "1", "2", ")"]),
        ("(a (b 1) 2)", ["(", "a", "(", "b", "1", ")", "2", ")"]),
        ("[x {y z}]", ["[", "x", "{", "y", "z", "}", "]"]),
        ("'(x)", ["'", "(", "x", ")"]),
        ('"hi there"', ['"', "hi", "there", '"']),
        ("@x~y`z", ["@", "x", "~", "y", "`", "z"]),
        ("foo-bar baz?", ["foo-bar", "baz?"]),
        ("  \n\n (a)\n", ["(", "a", ")"]),
        ("((", ["(", "("]),
        (")x", [")", "x"]),
        ("", []),
        ("   ", []),
    ]
)
def test_tokenize(source, expected):
    assert texts(source) == expected


def test_tab_is_not_a_delimiter():
    assert texts("a\tb") == ["a\tb"]


def test_tab_after_delimiter_starts_a_token():
    assert texts("(\ta)") == ["(", "\ta", ")"]
    assert texts("\t(a)") == ["(", "a", ")"]
    assert texts("( \t )") == ["(", ")"]


def test_delimiters_never_merge():
    assert texts("(((") == ["(", "(", "("]
    assert texts("''") == ["'", "'"]


def test_token_positions():
    tokens = tokenize("(a\n  bc)")
    assert tokens == [
        Token("(", 1, 1, 0),
        Token("a", 1, 2, 1),
        Token("bc", 2, 3, 5),
        Token(")", 2, 5, 7),
    ]


def test_token_str_is_text():
    assert str(tokenize("hello")[0]) == "hello"
