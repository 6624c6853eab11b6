"""
Test suite for the conversion engine: lexical builder + magnitude grouper.

Pure functions only — no I/O, no configuration.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from numbers_into_words.exceptions import InvalidAndOptionError, RangeViolation
from numbers_into_words.grouper import MAGNITUDE_NAMES, split_groups, to_words
from numbers_into_words.lexical import render_under_1000, single_digit, under_100
from numbers_into_words.models import MAX_VALUE, ConjunctionPolicy, Group

ALL_POLICIES = list(ConjunctionPolicy)

DIGITS = ["zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]

TEENS = [
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
]

TENS = ["twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]


def _expected_under_100(value: int) -> str:
    if value < 10:
        return DIGITS[value]
    if value < 20:
        return TEENS[value - 10]
    tens, units = divmod(value, 10)
    word = TENS[tens - 2]
    return word if units == 0 else f"{word}-{DIGITS[units]}"


# ═══════════════════════════════════════════════════════════════════════
# CONJUNCTION POLICY
# ═══════════════════════════════════════════════════════════════════════


class TestConjunctionPolicy:
    def test_exactly_four_members(self):
        assert [p.value for p in ConjunctionPolicy] == ["none", "last", "below1k", "all"]

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("none", ConjunctionPolicy.NONE),
            ("LAST", ConjunctionPolicy.LAST_GROUP_ONLY),
            ("Below1K", ConjunctionPolicy.UNDER_THOUSAND),
            ("all", ConjunctionPolicy.ALL),
        ],
    )
    def test_from_token_case_insensitive(self, token, expected):
        assert ConjunctionPolicy.from_token(token) is expected

    @pytest.mark.parametrize("token", ["all ", "\tnone", " last", "", "al l"])
    def test_from_token_rejects_untrimmed_or_unknown(self, token):
        with pytest.raises(InvalidAndOptionError):
            ConjunctionPolicy.from_token(token)

    def test_none_never_inserts_and(self):
        policy = ConjunctionPolicy.NONE
        assert policy.insert_and(0, 731) == " "
        assert policy.insert_and(3, 731_000_000_000) == " "

    def test_last_group_only(self):
        policy = ConjunctionPolicy.LAST_GROUP_ONLY
        assert policy.insert_and(0, 350_000_430) == " and "
        assert policy.insert_and(2, 350_000_430) == " "

    def test_under_thousand(self):
        policy = ConjunctionPolicy.UNDER_THOUSAND
        assert policy.insert_and(0, 731) == " and "
        assert policy.insert_and(0, 2859) == " "
        assert policy.insert_and(1, 2859) == " "

    def test_all_always_inserts_and(self):
        policy = ConjunctionPolicy.ALL
        assert policy.insert_and(0, 5) == " and "
        assert policy.insert_and(6, MAX_VALUE) == " and "


# ═══════════════════════════════════════════════════════════════════════
# LEXICAL BUILDER
# ═══════════════════════════════════════════════════════════════════════


class TestSingleDigit:
    def test_all_digits(self):
        assert [single_digit(d) for d in range(10)] == DIGITS

    @pytest.mark.parametrize("value", [-1, 10, 14])
    def test_out_of_range(self, value):
        with pytest.raises(RangeViolation):
            single_digit(value)


class TestUnder100:
    def test_all_values_under_100(self):
        for value in range(100):
            assert under_100(value) == _expected_under_100(value), value

    def test_composed_teens(self):
        assert under_100(14) == "fourteen"
        assert under_100(16) == "sixteen"
        assert under_100(17) == "seventeen"
        assert under_100(19) == "nineteen"

    def test_composed_tens(self):
        assert under_100(60) == "sixty"
        assert under_100(70) == "seventy"
        assert under_100(90) == "ninety"

    def test_irregular_tens(self):
        assert under_100(40) == "forty"
        assert under_100(80) == "eighty"

    def test_hyphenated_compound(self):
        assert under_100(47) == "forty-seven"
        assert under_100(21) == "twenty-one"
        assert under_100(99) == "ninety-nine"

    def test_out_of_range(self):
        with pytest.raises(RangeViolation):
            under_100(105)


class TestRenderUnder1000:
    def test_small_values_ignore_policy(self):
        for policy in ALL_POLICIES:
            assert render_under_1000(3, 0, policy, 3) == "three"
            assert render_under_1000(47, 0, policy, 47) == "forty-seven"

    def test_exact_hundreds_have_no_separator(self):
        for policy in ALL_POLICIES:
            assert render_under_1000(300, 0, policy, 300) == "three-hundred"
            assert render_under_1000(900, 2, policy, 900_000_000) == "nine-hundred"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (120, "one-hundred and twenty"),
            (247, "two-hundred and forty-seven"),
            (403, "four-hundred and three"),
            (612, "six-hundred and twelve"),
            (919, "nine-hundred and nineteen"),
        ],
    )
    def test_all_policy(self, value, expected):
        assert render_under_1000(value, 0, ConjunctionPolicy.ALL, value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (120, "one-hundred twenty"),
            (403, "four-hundred three"),
            (919, "nine-hundred nineteen"),
        ],
    )
    def test_none_policy(self, value, expected):
        assert render_under_1000(value, 0, ConjunctionPolicy.NONE, value) == expected

    def test_last_group_policy_by_index(self):
        policy = ConjunctionPolicy.LAST_GROUP_ONLY
        assert render_under_1000(612, 0, policy, 234_612) == "six-hundred and twelve"
        assert render_under_1000(120, 1, policy, 120_330) == "one-hundred twenty"
        assert render_under_1000(247, 1, policy, 247_123) == "two-hundred forty-seven"

    def test_under_thousand_policy_by_full_value(self):
        policy = ConjunctionPolicy.UNDER_THOUSAND
        assert render_under_1000(919, 0, policy, 919) == "nine-hundred and nineteen"
        assert render_under_1000(120, 1, policy, 120_330) == "one-hundred twenty"
        assert render_under_1000(859, 0, policy, 2859) == "eight-hundred fifty-nine"

    @pytest.mark.parametrize("policy", ALL_POLICIES)
    def test_out_of_range(self, policy):
        with pytest.raises(RangeViolation):
            render_under_1000(2105, 0, policy, 2105)

    @pytest.mark.parametrize("group_index", [-1, 7])
    def test_group_index_out_of_range(self, group_index):
        with pytest.raises(RangeViolation):
            render_under_1000(731, group_index, ConjunctionPolicy.NONE, 731)

    def test_group_index_checked_below_one_hundred(self):
        with pytest.raises(RangeViolation):
            render_under_1000(5, 9, ConjunctionPolicy.ALL, 5)

    def test_range_violation_is_assertion_error(self):
        with pytest.raises(AssertionError):
            render_under_1000(1000, 0, ConjunctionPolicy.ALL, 1000)


# ═══════════════════════════════════════════════════════════════════════
# MAGNITUDE GROUPER
# ═══════════════════════════════════════════════════════════════════════


class TestSplitGroups:
    def test_magnitude_table(self):
        assert MAGNITUDE_NAMES == (
            "", " thousand", " million", " billion",
            " trillion", " quadrillion", " quintillion",
        )

    def test_drops_zero_groups(self):
        assert split_groups(14_000_001_019) == [
            Group(14, 3, 14_000_001_019),
            Group(1, 1, 14_000_001_019),
            Group(19, 0, 14_000_001_019),
        ]

    def test_zero_has_no_groups(self):
        assert split_groups(0) == []

    def test_max_value_has_seven_groups(self):
        assert [g.value for g in split_groups(MAX_VALUE)] == [18, 446, 744, 73, 709, 551, 615]


class TestToWords:
    @pytest.mark.parametrize("policy", ALL_POLICIES)
    def test_zero(self, policy):
        assert to_words(0, policy) == "zero"

    @pytest.mark.parametrize("policy", ALL_POLICIES)
    def test_digits_independent_of_policy(self, policy):
        for value in range(10):
            assert to_words(value, policy) == DIGITS[value]

    @pytest.mark.parametrize("policy", ALL_POLICIES)
    def test_two_digit_forms(self, policy):
        for value in range(10, 100):
            assert to_words(value, policy) == _expected_under_100(value)

    def test_default_policy_is_all(self):
        assert to_words(731) == "seven-hundred and thirty-one"

    @pytest.mark.parametrize(
        "value, policy, expected",
        [
            (350_000_430, ConjunctionPolicy.NONE,
             "three-hundred fifty million, four-hundred thirty"),
            (350_000_430, ConjunctionPolicy.LAST_GROUP_ONLY,
             "three-hundred fifty million, four-hundred and thirty"),
            (2859, ConjunctionPolicy.UNDER_THOUSAND,
             "two thousand, eight-hundred fifty-nine"),
            (731, ConjunctionPolicy.UNDER_THOUSAND, "seven-hundred and thirty-one"),
            (731, ConjunctionPolicy.ALL, "seven-hundred and thirty-one"),
        ],
    )
    def test_policy_table(self, value, policy, expected):
        assert to_words(value, policy) == expected

    def test_none_policy_examples(self):
        policy = ConjunctionPolicy.NONE
        assert to_words(2105, policy) == "two thousand, one-hundred five"
        assert to_words(200_105, policy) == "two-hundred thousand, one-hundred five"
        assert to_words(530_175_000, policy) == (
            "five-hundred thirty million, one-hundred seventy-five thousand"
        )
        assert to_words(4_000_175_999, policy) == (
            "four billion, one-hundred seventy-five thousand, nine-hundred ninety-nine"
        )
        assert to_words(14_000_001_019, policy) == "fourteen billion, one thousand, nineteen"

    def test_all_policy_examples(self):
        policy = ConjunctionPolicy.ALL
        assert to_words(2105, policy) == "two thousand, one-hundred and five"
        assert to_words(530_175_999, policy) == (
            "five-hundred and thirty million, one-hundred and seventy-five thousand, "
            "nine-hundred and ninety-nine"
        )

    def test_large_value_none_policy(self):
        assert to_words(17_654_123_456_789_012_345, ConjunctionPolicy.NONE) == (
            "seventeen quintillion, six-hundred fifty-four quadrillion, "
            "one-hundred twenty-three trillion, four-hundred fifty-six billion, "
            "seven-hundred eighty-nine million, twelve thousand, three-hundred forty-five"
        )

    def test_maximum_value(self):
        assert to_words(18_446_744_073_709_551_615, ConjunctionPolicy.ALL) == (
            "eighteen quintillion, four-hundred and forty-six quadrillion, "
            "seven-hundred and forty-four trillion, seventy-three billion, "
            "seven-hundred and nine million, five-hundred and fifty-one thousand, "
            "six-hundred and fifteen"
        )

    def test_maximum_value_last_group_only(self):
        assert to_words(MAX_VALUE, ConjunctionPolicy.LAST_GROUP_ONLY) == (
            "eighteen quintillion, four-hundred forty-six quadrillion, "
            "seven-hundred forty-four trillion, seventy-three billion, "
            "seven-hundred nine million, five-hundred fifty-one thousand, "
            "six-hundred and fifteen"
        )

    def test_census_number(self):
        assert to_words(330_759_736, ConjunctionPolicy.ALL) == (
            "three-hundred and thirty million, seven-hundred and fifty-nine thousand, "
            "seven-hundred and thirty-six"
        )

    @pytest.mark.parametrize(
        "value",
        [1000, 1_000_001, 10**18, 999_000_999_000, 123_456_789_012_345, MAX_VALUE],
    )
    def test_group_count_matches_nonzero_groups(self, value):
        nonzero = []
        rest = value
        while rest:
            rest, group = divmod(rest, 1000)
            nonzero.append(group)
        expected_groups = sum(1 for g in nonzero if g)
        words = to_words(value, ConjunctionPolicy.NONE)
        assert len(words.split(", ")) == expected_groups

    def test_groups_are_most_significant_first(self):
        words = to_words(1_002_003_004, ConjunctionPolicy.NONE)
        assert words == "one billion, two million, three thousand, four"

    @pytest.mark.parametrize("value", [-1, MAX_VALUE + 1, 2**70])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(RangeViolation):
            to_words(value)

    @pytest.mark.parametrize("value", [True, 1.0, "12"])
    def test_rejects_non_int(self, value):
        with pytest.raises(RangeViolation):
            to_words(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("policy", ALL_POLICIES)
    def test_separator_invariants_up_to_a_million(self, policy):
        for value in range(1_000_000):
            words = to_words(value, policy)
            assert "  " not in words, value
            assert words == words.strip(), value
            assert not words.startswith(","), value
            assert not words.endswith(","), value
            nonzero_groups = (value // 1000 != 0) + (value % 1000 != 0)
            assert words.count(",") == max(nonzero_groups - 1, 0), value
