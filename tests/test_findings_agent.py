# tests/test_findings_agent.py
import pytest

from agents import findings_agent
from models.site_models import ContentSignals, StructuredDataRecord


def test_missing_schema_when_nothing_present():
    assert findings_agent.build_missing_schema(ContentSignals()) == [
        "FAQ",
        "Question",
        "HowTo",
        "Article",
        "BlogPosting",
        "BreadcrumbList",
        "VideoObject",
        "Product",
    ]


def test_missing_schema_when_all_present():
    signals = ContentSignals(has_faq=True, has_how_to=True, has_article=True)
    assert findings_agent.build_missing_schema(signals) == ["BreadcrumbList", "VideoObject", "Product"]


def test_schema_examples_without_records_suggest_faq_template():
    examples = findings_agent.build_schema_examples([], "example.com", has_faq=False)

    assert len(examples) == 1
    assert examples[0].type == "Missing FAQ Schema"
    assert examples[0].code is None
    assert "What is example.com?" in examples[0].recommendation
    assert '"@type": "FAQPage"' in examples[0].recommendation


def test_schema_examples_preview_first_record():
    record = StructuredDataRecord(type_name="Organization", raw={"@type": "Organization", "name": "x" * 500})
    examples = findings_agent.build_schema_examples([record], "example.com", has_faq=True)

    assert len(examples) == 1
    assert examples[0].type == "Schema Found: Organization"
    assert examples[0].issue == "Only basic schema - expand coverage"
    assert examples[0].code.endswith("...")
    assert len(examples[0].code) == findings_agent.SCHEMA_PREVIEW_CHARS + 3


def test_schema_examples_untyped_and_multiple():
    records = [StructuredDataRecord(raw=[1, 2]), StructuredDataRecord(type_name="FAQPage", raw={})]
    examples = findings_agent.build_schema_examples(records, "example.com", has_faq=True)

    assert examples[0].type == "Schema Found: Unknown"
    assert examples[0].issue == "Multiple schemas found"


@pytest.mark.parametrize(
    "title,issue",
    [
        ("", "Missing title"),
        ("Short", "Too short"),
        ("t" * 61, "Too long"),
        ("t" * 45, "Could be more specific"),
    ],
)
def test_title_issue(title, issue):
    title_example, _ = findings_agent.build_meta_examples(title, "", "example.com")
    assert title_example.issue == issue
    assert "example.com" in title_example.recommendation


@pytest.mark.parametrize(
    "meta,issue",
    [
        ("", "Missing meta description"),
        ("short", "Too short"),
        ("m" * 80, "Optimize for direct answers"),
    ],
)
def test_meta_issue(meta, issue):
    _, meta_example = findings_agent.build_meta_examples("Title", meta, "example.com")
    assert meta_example.issue == issue


def test_meta_examples_show_placeholders_when_missing():
    title_example, meta_example = findings_agent.build_meta_examples("", "", "example.com")
    assert title_example.current == "<title>No title</title>"
    assert 'content="Missing"' in meta_example.current


def test_heading_examples_question_h1():
    examples = findings_agent.build_heading_examples(["What is AEO?"], [])
    assert len(examples) == 1
    assert examples[0].issue.startswith("Good - question format")
    assert examples[0].recommendation == "Maintain question format"


def test_heading_examples_statement_h1_and_h2():
    examples = findings_agent.build_heading_examples(["Widgets", "Ignored"], ["Overview"])

    assert [e.tag for e in examples] == ["H1", "H2"]
    assert examples[0].issue == "Not in question format"
    assert "How Does Widgets Work?" in examples[0].recommendation
    assert examples[1].text == "Overview"
    assert examples[1].issue == "Generic heading"


def test_heading_examples_empty():
    assert findings_agent.build_heading_examples([], []) == []


def test_author_examples_substitute_domain():
    examples = findings_agent.build_author_examples("example.com")
    assert any("example.com" in (e.recommendation or "") for e in examples)


def test_citation_examples_branch_on_link_count():
    few = findings_agent.build_citation_examples(2)
    many = findings_agent.build_citation_examples(12)

    assert few[0].detail == "2 external link(s) found"
    assert few[0].issue != many[0].issue


def test_content_examples_for_thin_page():
    examples = findings_agent.build_content_examples(200)
    types = [e.type for e in examples]

    assert types == ["Content Depth", "Missing Statistics", "Missing Data Tables"]
    assert examples[0].issue.startswith("Thin content")


def test_content_examples_for_rich_page():
    examples = findings_agent.build_content_examples(2500, has_table=True, has_percent_data=True)

    assert len(examples) == 1
    assert examples[0].issue.startswith("Comprehensive depth")
