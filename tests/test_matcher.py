import pytest
from ats_keywords.matcher import match_keywords


def test_whole_word_enforced():
    assert match_keywords("javascriptx developer", ["javascript"]).matched == []
    assert match_keywords("uses javascript daily", ["javascript"]).matched == ["javascript"]


def test_case_insensitive_and_score_rounding():
    res = match_keywords("Python and SQL every day", ["python", "sql", "aws"])
    assert res.matched == ["python", "sql"]
    assert res.missing == ["aws"]
    assert res.match_score == 67
    assert res.match_count == 2
    assert res.total_keywords == 3


def test_phrases_match_only_as_exact_sequence():
    assert match_keywords("learning about machine tools", ["machine learning"]).missing == ["machine learning"]
    assert match_keywords("Machine Learning engineer", ["machine learning"]).matched == ["machine learning"]


def test_symbol_terminated_keywords():
    res = match_keywords("Expert in C++ and C#.", ["c++", "c#", "node.js"])
    assert res.matched == ["c++", "c#"]
    assert res.missing == ["node.js"]


def test_regex_metacharacters_are_literal():
    assert match_keywords("ci/cd pipelines", ["ci/cd"]).match_score == 100
    assert match_keywords("nodexjs", ["node.js"]).match_score == 0


def test_zero_keywords_scores_zero():
    res = match_keywords("anything", [])
    assert res.match_score == 0
    assert res.matched == [] and res.missing == []
    assert res.total_keywords == 0


def test_empty_document_misses_everything():
    res = match_keywords("", ["python", "aws"])
    assert res.matched == []
    assert res.missing == ["python", "aws"]
    assert res.match_score == 0


@pytest.mark.parametrize(
    "doc, kws",
    [
        ("python aws docker", ["python", "java"]),
        ("nothing here", ["a1", "b2", "c3"]),
        ("terraform", ["terraform"]),
        ("Salesforce CRM, reporting", ["salesforce", "crm", "reporting", "hubspot", "excel", "sql", "git"]),
    ],
)
def test_match_invariants(doc, kws):
    res = match_keywords(doc, kws)
    assert len(res.matched) + len(res.missing) == len(kws) == res.total_keywords
    assert res.match_score == int(100 * len(res.matched) / len(kws) + 0.5)


@pytest.mark.parametrize(
    "hits, expected",
    [(1, 13), (3, 38), (5, 63), (7, 88)],
)
def test_half_scores_round_up(hits, expected):
    kws = ["kw%d" % i for i in range(8)]
    res = match_keywords(" ".join(kws[:hits]), kws)
    assert res.match_count == hits
    assert res.match_score == expected


def test_blank_and_non_string_keywords_are_dropped_before_counting():
    res = match_keywords("python", ["python", "", "   ", None, 7])
    assert res.matched == ["python"]
    assert res.missing == []
    assert res.total_keywords == 1
    assert res.match_score == 100
