"""Tests for selector parsing with pseudo names checked against a CSS level."""

import pytest

from csspseudo.context import ValidationContext
from csspseudo.errors import ArgumentSyntaxError, MissingInputError, SelectorError, UnknownNameError
from csspseudo.nth import NthExpression
from csspseudo.pseudo import PseudoFunctionLang, PseudoFunctionNthChild
from csspseudo.selector import ComplexSelector, SelectorList, SelectorTokenizer, SimpleSelector, TokenType, parse_selector

CSS1 = ValidationContext("css1")
CSS21 = ValidationContext("css21")
CSS3 = ValidationContext("css3")
CSS3_TV = ValidationContext("css3", "tv")


def _simple(parsed, index=0):
    return parsed.parts[0][1].selectors[index]


class TestTokenizer:
    """Tests for SelectorTokenizer."""

    def test_pseudo_tokens_keep_positions(self):
        tokens = SelectorTokenizer("a::before").tokenize()
        assert [t.type for t in tokens] == [TokenType.TAG, TokenType.DOUBLE_COLON, TokenType.TAG, TokenType.EOF]
        assert tokens[2].pos == 3

    def test_function_argument_is_raw(self):
        tokens = SelectorTokenizer(":nth-child( 2n + 1 )").tokenize()
        argument = [t for t in tokens if t.type == TokenType.STRING][0]
        assert argument.value == "2n + 1"
        assert argument.pos == 12

    def test_parenthesis_inside_quotes(self):
        tokens = SelectorTokenizer(':lang("a)b")').tokenize()
        argument = [t for t in tokens if t.type == TokenType.STRING][0]
        assert argument.value == '"a)b"'

    def test_unclosed_function(self):
        with pytest.raises(SelectorError) as excinfo:
            SelectorTokenizer(":nth-child(2n+1").tokenize()
        assert excinfo.value.code == "expected-closing-paren"

    def test_attribute_selectors_unsupported(self):
        with pytest.raises(SelectorError) as excinfo:
            SelectorTokenizer("a[href]").tokenize()
        assert excinfo.value.code == "unsupported-attribute-selector"
        assert excinfo.value.position == 1


class TestParseSelector:
    """Tests for parse_selector()."""

    def test_nth_child(self):
        parsed = parse_selector("li:nth-child(2n+1)", CSS3)
        assert isinstance(parsed, ComplexSelector)
        pseudo = _simple(parsed, 1)
        assert pseudo.type == SimpleSelector.TYPE_PSEUDO_FUNCTION
        assert isinstance(pseudo.function, PseudoFunctionNthChild)
        assert pseudo.function.argument == NthExpression(2, 1)

    def test_lang_with_quoted_parenthesis(self):
        pseudo = _simple(parse_selector(':lang("a)b")', CSS21))
        assert isinstance(pseudo.function, PseudoFunctionLang)
        assert pseudo.function.argument == "a)b"

    def test_selector_list(self):
        parsed = parse_selector("div > p, .x", CSS3)
        assert isinstance(parsed, SelectorList)
        assert len(parsed.selectors) == 2
        assert parsed.selectors[0].parts[1][0] == ">"

    def test_pseudo_names_are_case_insensitive(self):
        assert _simple(parse_selector(":HOVER", CSS3)).name == "hover"

    def test_parsing_is_repeatable(self):
        assert parse_selector("a:not(.b)::before", CSS3) == parse_selector("a:not(.b)::before", CSS3)

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty(self, text):
        with pytest.raises(MissingInputError) as excinfo:
            parse_selector(text)
        assert excinfo.value.code == "empty-selector"

    def test_default_context_is_css3(self):
        assert _simple(parse_selector("::marker")).type == SimpleSelector.TYPE_PSEUDO_ELEMENT

    @pytest.mark.parametrize(
        "text,code",
        [
            ("div >", "expected-selector-after-combinator"),
            (", a", "unexpected-token"),
            ("a)", "unexpected-character"),
            ("#", "expected-identifier"),
            (":", "expected-identifier"),
        ],
    )
    def test_syntax_errors(self, text, code):
        with pytest.raises(SelectorError) as excinfo:
            parse_selector(text, CSS3)
        assert excinfo.value.code == code


class TestNameChecks:
    """Tests for checking pseudo names against the capability tables."""

    def test_pseudo_class_unknown_to_level(self):
        with pytest.raises(UnknownNameError) as excinfo:
            parse_selector("a:hover", CSS1)
        assert excinfo.value.code == "unknown-pseudo-class"
        assert excinfo.value.position == 2

    def test_profile_overrides_version(self):
        with pytest.raises(UnknownNameError):
            parse_selector("a:hover", CSS3_TV)
        parsed = parse_selector("li:first-child", ValidationContext("css1", "tv"))
        assert _simple(parsed, 1).type == SimpleSelector.TYPE_PSEUDO_CLASS

    def test_pseudo_element_levels(self):
        with pytest.raises(UnknownNameError) as excinfo:
            parse_selector("li::marker", CSS21)
        assert excinfo.value.code == "unknown-pseudo-element"
        assert _simple(parse_selector("li::marker", CSS3), 1).type == SimpleSelector.TYPE_PSEUDO_ELEMENT

    def test_single_colon_pseudo_element(self):
        assert _simple(parse_selector("p:before", CSS21), 1).type == SimpleSelector.TYPE_PSEUDO_ELEMENT
        assert _simple(parse_selector("p:first-line", CSS1), 1).type == SimpleSelector.TYPE_PSEUDO_ELEMENT
        with pytest.raises(UnknownNameError) as excinfo:
            parse_selector("p:marker", CSS3)
        assert excinfo.value.code == "unknown-pseudo-class"

    def test_pseudo_function_levels(self):
        with pytest.raises(UnknownNameError) as excinfo:
            parse_selector(":lang(fr)", CSS1)
        assert excinfo.value.code == "unknown-pseudo-function"
        assert _simple(parse_selector(":lang(fr)", CSS21)).function.argument == "fr"
        with pytest.raises(UnknownNameError):
            parse_selector(":nth-child(2n)", CSS21)

    def test_advertised_but_not_built(self):
        with pytest.raises(UnknownNameError) as excinfo:
            parse_selector(":is(.a)", CSS3)
        assert excinfo.value.code == "unknown-pseudo-function"

    def test_pseudo_element_cannot_take_arguments(self):
        with pytest.raises(UnknownNameError) as excinfo:
            parse_selector("::before(x)", CSS3)
        assert excinfo.value.code == "unknown-pseudo-element"


class TestArgumentPositions:
    """Errors from pseudo-function arguments point into the whole selector."""

    def test_nth_argument(self):
        with pytest.raises(ArgumentSyntaxError) as excinfo:
            parse_selector(":nth-child(2n+foo)", CSS3)
        assert excinfo.value.position == 14

    def test_nested_negation(self):
        with pytest.raises(ArgumentSyntaxError) as excinfo:
            parse_selector(":not(:not(.a))", CSS3)
        assert excinfo.value.code == "nested-negation"
        assert excinfo.value.position == 5

    def test_missing_argument(self):
        with pytest.raises(MissingInputError) as excinfo:
            parse_selector("li:nth-child()", CSS3)
        assert excinfo.value.code == "missing-pseudo-argument"
        assert excinfo.value.position == 13
