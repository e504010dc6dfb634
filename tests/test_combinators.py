import pytest

from funparse.combinators import between, chainl, either, lazy, many, map_parser, optional, pair, plus, some, then, unit
from funparse.core import Parser, ParsingResult, parser
from funparse.primitives import char, digit, letter


@parser
def ambiguous_ab(text):
    # "a" or "ab", both valid readings of the same input
    if text.startswith("ab"):
        return [ParsingResult("a", text[1:]), ParsingResult("ab", text[2:])]
    if text.startswith("a"):
        return [ParsingResult("a", text[1:])]
    return []


class TestSome:
    def test_no_parse_when_parser_never_matches(self) -> None:
        assert some(digit)("abc") == []
        assert some(digit)("") == []

    def test_collects_consecutive_matches(self) -> None:
        assert some(digit)("123abc") == [ParsingResult([1, 2, 3], "abc")]

    def test_consumes_everything(self) -> None:
        assert some(letter)("abc") == [ParsingResult(["a", "b", "c"], "")]

    @pytest.mark.parametrize("k", [1, 2, 5, 40])
    def test_length_matches_run(self, k) -> None:
        (items, rest), = some(digit)("7" * k + "!")
        assert len(items) == k
        assert rest == "!"

    def test_takes_first_branch_only(self) -> None:
        assert some(ambiguous_ab)("abab") == [ParsingResult(["a"], "bab")]

    def test_stops_on_empty_match(self) -> None:
        assert some(many(digit))("12x") == [ParsingResult([[1, 2]], "x")]
        assert some(unit(0))("abc") == []

    def test_long_run_does_not_recurse(self) -> None:
        (items, rest), = some(digit)("1" * 5000)
        assert len(items) == 5000
        assert rest == ""


class TestEither:
    def test_first_results_win(self) -> None:
        p = either(char("a"), letter)
        assert p("abc") == [ParsingResult("a", "bc")]

    def test_second_not_run_when_first_matches(self) -> None:
        calls = []

        @parser
        def spy(text):
            calls.append(text)
            return [ParsingResult("spy", text)]

        assert (char("a") | spy)("abc") == [ParsingResult("a", "bc")]
        assert calls == []

    def test_falls_back_to_second(self) -> None:
        assert (digit | letter)("x1") == [ParsingResult("x", "1")]

    def test_no_parse_when_both_fail(self) -> None:
        assert (digit | letter)("+") == []

    def test_ambiguous_first_returned_unchanged(self) -> None:
        assert (ambiguous_ab | letter)("abc") == ambiguous_ab("abc")


class TestMap:
    def test_transforms_parsed_only(self) -> None:
        assert digit.map(lambda d: d * 10)("42") == [ParsingResult(40, "2")]

    def test_empty_stays_empty(self) -> None:
        assert map_parser(digit, str)("x") == []

    def test_maps_every_branch(self) -> None:
        assert ambiguous_ab.map(str.upper)("abc") == [
            ParsingResult("A", "bc"),
            ParsingResult("AB", "c"),
        ]


class TestThen:
    def test_pairs_two_values(self) -> None:
        assert then(letter, digit)("a1!") == [ParsingResult(["a", 1], "!")]

    def test_plus_operator_and_alias(self) -> None:
        assert (letter + digit)("a1!") == plus(letter, digit)("a1!")

    def test_flattens_chained_sequences(self) -> None:
        p = letter + digit + letter
        assert p("a1b!") == [ParsingResult(["a", 1, "b"], "!")]

    def test_appends_to_any_list_valued_parser(self) -> None:
        assert (some(digit) + letter)("12a") == [ParsingResult([1, 2, "a"], "")]
        assert (many(digit) + letter)("a") == [ParsingResult(["a"], "")]

    def test_pair_keeps_list_nested(self) -> None:
        assert pair(some(digit), letter)("12a") == [ParsingResult([[1, 2], "a"], "")]
        assert pair(letter, digit)("a1") == (letter + digit)("a1")

    def test_no_parse_if_either_side_fails(self) -> None:
        assert (letter + digit)("1a") == []
        assert (letter + digit)("ab") == []
        assert (letter + digit)("a") == []

    def test_full_cross_product_under_ambiguity(self) -> None:
        p = ambiguous_ab + many(char("b"))
        assert p("abb") == [
            ParsingResult(["a", ["b", "b"]], ""),
            ParsingResult(["ab", ["b"]], ""),
        ]

    def test_branch_without_second_match_contributes_nothing(self) -> None:
        assert (ambiguous_ab + char("b"))("abc") == [ParsingResult(["a", "b"], "c")]


class TestHelpers:
    def test_unit_consumes_nothing(self) -> None:
        assert unit(5)("abc") == [ParsingResult(5, "abc")]
        assert unit(5)("") == [ParsingResult(5, "")]

    def test_many_allows_zero(self) -> None:
        assert many(digit)("abc") == [ParsingResult([], "abc")]
        assert many(digit)("12c") == [ParsingResult([1, 2], "c")]

    def test_optional_default(self) -> None:
        assert optional(char("-"), "+")("5") == [ParsingResult("+", "5")]
        assert optional(char("-"))("-5") == [ParsingResult("-", "5")]

    def test_between_keeps_body(self) -> None:
        p = between(char("["), some(digit), char("]"))
        assert p("[12]x") == [ParsingResult([1, 2], "x")]
        assert p("[12x") == []

    def test_chainl_folds_left(self) -> None:
        minus = char("-").map(lambda _: lambda a, b: a - b)
        assert chainl(digit, minus)("9-3-2") == [ParsingResult(4, "")]

    def test_chainl_leaves_dangling_operator(self) -> None:
        minus = char("-").map(lambda _: lambda a, b: a - b)
        assert chainl(digit, minus)("9-") == [ParsingResult(9, "-")]

    def test_chainl_drops_branch_on_arithmetic_error(self) -> None:
        div = char("/").map(lambda _: lambda a, b: a // b)
        assert chainl(digit, div)("8/0") == []
        assert chainl(digit, div)("8/2") == [ParsingResult(4, "")]

    def test_lazy_builds_once(self) -> None:
        built = []

        def build():
            built.append(1)
            return digit

        p = lazy(build)
        assert built == []
        assert p("1") == [ParsingResult(1, "")]
        assert p("2") == [ParsingResult(2, "")]
        assert built == [1]


def test_parser_repr_names_composition() -> None:
    assert repr(letter + digit) == "<Parser letter + digit>"
    assert repr(pair(letter, digit)) == "<Parser pair(letter, digit)>"
    assert isinstance(digit | letter, Parser)


def test_parsers_are_deterministic() -> None:
    p = some(letter | digit) + char("!")
    assert p("ab12!?") == p("ab12!?")


def test_unparsed_is_suffix_of_input() -> None:
    text = "ab12!?"
    for p in [some(letter), letter + digit, some(letter | digit) + char("!"), many(digit)]:
        for _, rest in p(text):
            assert text.endswith(rest)
