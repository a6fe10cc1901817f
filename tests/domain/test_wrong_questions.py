"""
Tests for academy.domain.scores.wrong_questions
"""
import pytest

from academy.domain.scores.wrong_questions import parse_wrong_questions


def test_parse_drops_unparsable_and_non_positive_tokens():
    assert parse_wrong_questions("3, 7, x, -2, 15") == [3, 7, 15]


@pytest.mark.parametrize("text", [None, "", "   ", ",,,", "a,b,c", "0,-1"])
def test_parse_empty_or_garbage_gives_empty(text):
    assert parse_wrong_questions(text) == []


def test_parse_is_idempotent():
    text = " 15,3 ,7,3, abc, 0 "
    once = parse_wrong_questions(text)
    again = parse_wrong_questions(",".join(str(n) for n in once))
    assert once == again == [3, 7, 15]


def test_parse_uses_leading_integer_like_parseint():
    # "7번" -> 7, "3.5" -> 3, "x7" -> dropped
    assert parse_wrong_questions("7번, 3.5, x7") == [3, 7]
