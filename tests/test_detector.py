"""
tests/test_detector.py — Unit Tests for the Karma Expression Detector
======================================================================
"""

from __future__ import annotations

import pytest

from karmabot.engine.detector import KarmaIntent, detect_karma_intent, is_addressed_to_bot

USER = "UA42B4D"


def _target(text: str) -> str:
    intent = detect_karma_intent(text, USER)
    assert intent is not None
    return intent.target


# ---------------------------------------------------------------------------
# Target finding
# ---------------------------------------------------------------------------
class TestSimpleTargets:
    def test_first_word(self):
        assert _target("Ken++") == "Ken"

    def test_second_word(self):
        assert _target("Omg Ken++") == "Ken"

    def test_words_before_and_after(self):
        assert _target("Omg Ken++, lol") == "Ken"

    def test_first_match_wins(self):
        assert _target("Omg Ken++ and burgers++") == "Ken"


class TestComplexTargets:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("l33tsp3ak++", "l33tsp3ak"),
            ("411++", "411"),
            ("L&L++", "L&L"),
            ("$$$++", "$$$"),
            ("(hello)++", "(hello)"),
            ("[hello]++", "[hello]"),
            ("lisp-case++", "lisp-case"),
            ("long-lisp-case++", "long-lisp-case"),
            ("a+b++", "a+b"),
            ("a+b+c++", "a+b+c"),
            ("_italics_++", "_italics_"),
            ("`backticks`++", "`backticks`"),
            ("*bold*++", "*bold*"),
            ("~strikethrough~++", "~strikethrough~"),
            ("^.^++", "^.^"),
            ("it's++", "it's"),
        ],
    )
    def test_punctuation_is_part_of_target(self, text, expected):
        assert _target(text) == expected

    def test_mention_with_space_before_operator(self):
        assert _target("<@UAEB34D> ++") == "<@UAEB34D>"

    def test_mention_without_space(self):
        assert _target("nice work <@UAEB34D>++") == "<@UAEB34D>"


class TestQuotedTargets:
    def test_quoted_phrase_strips_quotes(self):
        assert _target('"chocolate cake"++') == "chocolate cake"

    def test_quoted_phrase_among_other_words(self):
        assert _target('Yeah "chocolate cake"++, amirite?') == "chocolate cake"

    def test_quoted_phrase_decrement(self):
        intent = detect_karma_intent('"monday mornings"---', USER)
        assert intent == KarmaIntent("monday mornings", -2, False, False)


class TestNoTargets:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "this has no incs or decs",
            "this+-",
            "this almost has a ++",
            "this almost has a --",
            "Ken+ is close",
            "<@UAEB34D> what?",
        ],
    )
    def test_returns_none(self, text):
        assert detect_karma_intent(text, USER) is None


# ---------------------------------------------------------------------------
# Amounts and buzzkill
# ---------------------------------------------------------------------------
class TestAmount:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("target++", 1),
            ("target+++", 2),
            ("target++++", 3),
            ("target+++++", 4),
            ("target++++++", 4),
            ("target--", -1),
            ("target---", -2),
            ("target----", -3),
            ("target-----", -4),
            ("target------", -4),
        ],
    )
    def test_amount_is_run_length_minus_one_clamped(self, text, expected):
        assert detect_karma_intent(text, USER).amount == expected


class TestBuzzkill:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("target++", False),
            ("target+++++", False),
            ("target++++++", True),
            ("target+++++++", True),
            ("target--", False),
            ("target-----", False),
            ("target------", True),
            ("target-------", True),
        ],
    )
    def test_buzzkill_above_five_operators(self, text, expected):
        assert detect_karma_intent(text, USER).is_buzzkill is expected


# ---------------------------------------------------------------------------
# Self-targeting
# ---------------------------------------------------------------------------
class TestSelfTargeting:
    def test_own_mention_without_space(self):
        assert detect_karma_intent(f"Ayyyy <@{USER}>++", USER).is_targeting_self is True

    def test_own_mention_with_space(self):
        assert detect_karma_intent(f"Ayyyy <@{USER}> ++", USER).is_targeting_self is True

    def test_other_mention_without_space(self):
        assert detect_karma_intent("Ayyyy <@UB4YUD>++", USER).is_targeting_self is False

    def test_other_mention_with_space(self):
        assert detect_karma_intent("Ayyyy <@UB4YUD> ++", USER).is_targeting_self is False

    def test_plain_word_is_never_self(self):
        assert detect_karma_intent(f"{USER}++", USER).is_targeting_self is False

    def test_no_asking_user(self):
        assert detect_karma_intent(f"<@{USER}>++").is_targeting_self is False

    def test_own_nickname_mention(self):
        intent = detect_karma_intent(f"Ayyyy <@!{USER}> ++", USER)
        assert intent.target == f"<@{USER}>"
        assert intent.is_targeting_self is True

    def test_other_nickname_mention_is_normalized(self):
        intent = detect_karma_intent("<@!UB4YUD>--", USER)
        assert (intent.target, intent.amount, intent.is_targeting_self) == ("<@UB4YUD>", -1, False)


# ---------------------------------------------------------------------------
# Bot address
# ---------------------------------------------------------------------------
class TestIsAddressedToBot:
    def test_starts_with_bot_mention(self):
        assert is_addressed_to_bot("<@UAEB42D> some-cmd", "UAEB42D") is True

    def test_other_mention(self):
        assert is_addressed_to_bot("<@UABE42D> some-cmd", "UAEB42D") is False

    def test_mention_later_in_text(self):
        assert is_addressed_to_bot("hey <@UAEB42D> top", "UAEB42D") is False

    def test_integer_snowflake(self):
        assert is_addressed_to_bot("<@1234567890> top", 1234567890) is True

    def test_nickname_mention(self):
        assert is_addressed_to_bot("<@!1234567890> top", 1234567890) is True

    def test_other_nickname_mention(self):
        assert is_addressed_to_bot("<@!1234567891> top", 1234567890) is False
