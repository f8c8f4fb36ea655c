import pytest
from ats_keywords.rules import is_high_value_keyword, is_reliable_keyword


@pytest.mark.parametrize(
    "token, expected",
    [
        ("ab", False),
        ("abc", True),
        ("a" * 31, False),
        ("a" * 30, True),
        ("123", False),
        ("c++", True),
        ("the", False),
        ("excellent", False),
        ("node.js", True),
        ("machine learning", True),
        ("-python", False),
        ("salesforcecrmreporting", False),
    ],
)
def test_is_reliable_keyword_boundaries(token, expected):
    assert is_reliable_keyword(token) is expected


@pytest.mark.parametrize("bad", [None, "", 42, ["python"]])
def test_is_reliable_keyword_non_strings_are_safe(bad):
    assert is_reliable_keyword(bad) is False


def test_is_high_value_keyword_sources():
    assert is_high_value_keyword("Python")
    assert is_high_value_keyword("senior python developer")  # pattern search, not full match
    assert is_high_value_keyword("gainsight")  # dictionary
    assert is_high_value_keyword("Customer Success Manager")  # phrase library
    assert not is_high_value_keyword("widgets")
    assert is_high_value_keyword("widgets", learned={"widgets"})
    assert not is_high_value_keyword(None)
