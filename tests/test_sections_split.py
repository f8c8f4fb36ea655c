import pytest
from ats_keywords.sections import JobDescriptionParser, classify_structure, split_sections, strip_markup


def test_split_sections_basic_headings_routed():
    text = """
About Us
We build payroll software.

Requirements:
- Python
- SQL

Nice to have: Kafka
**Responsibilities**
Own the billing service
"""
    secs = split_sections(text)
    assert secs["about"] == "We build payroll software."
    assert secs["requirements"] == "- Python\n- SQL"
    assert secs["qualifications"] == "Kafka"
    assert secs["responsibilities"] == "Own the billing service"
    assert "skills" not in secs


def test_text_before_first_heading_goes_to_other():
    secs = split_sections("Acme is hiring.\nSkills: Go, Rust")
    assert secs["other"] == "Acme is hiring."
    assert secs["skills"] == "Go, Rust"


def test_heading_word_inside_sentence_is_not_a_heading():
    secs = split_sections("About 5 years of Python required")
    assert list(secs) == ["other"]


@pytest.mark.parametrize(
    "heading, bucket",
    [
        ("Minimum Qualifications", "qualifications"),
        ("Preferred Qualifications", "qualifications"),
        ("What you'll do", "responsibilities"),
        ("What we're looking for", "requirements"),
        ("Tech Stack", "skills"),
        ("Who we are", "about"),
    ],
)
def test_heading_aliases(heading, bucket):
    secs = split_sections(f"{heading}\nTerraform")
    assert secs[bucket] == "Terraform"


def test_strip_markup_lists_and_entities():
    assert strip_markup("<ul><li>Python</li><li>AWS</li></ul>") == "- Python\n- AWS"
    assert strip_markup("<p>R&amp;D&nbsp;team</p><script>var x = 1;</script>") == "R&D team"
    assert strip_markup("") == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", "unstructured"),
        ("- Python\n- AWS\n- Docker", "bullets"),
        ("Python, SQL, AWS, Docker, Kubernetes, Terraform", "phrases"),
        (
            "You will design data pipelines for our analytics platform every day. "
            "You will also mentor two junior engineers on the data team.",
            "narrative",
        ),
        ("Python developer", "unstructured"),
    ],
)
def test_classify_structure(text, expected):
    assert classify_structure(text, split_sections(text)) == expected


def test_classify_structure_prefers_sections():
    text = "Requirements\n- Python\nResponsibilities\n- Build APIs"
    assert classify_structure(text, split_sections(text)) == "sections"


def test_parser_process_any_job_description_is_cached():
    parser = JobDescriptionParser()
    raw = "<h2>Skills</h2><ul><li>Python</li></ul><h2>Requirements</h2><p>AWS</p>"
    first = parser.process_any_job_description(raw)
    assert first.structure == "sections"
    assert first.sections["skills"] == "- Python"
    assert first.sections["requirements"] == "AWS"
    assert parser.process_any_job_description(raw) is first
    assert parser.get_cache_key(raw) == parser.get_cache_key(raw)
    assert parser.get_cache_key(raw) != parser.get_cache_key(raw + " ")
