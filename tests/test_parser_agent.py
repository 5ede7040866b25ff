# tests/test_parser_agent.py
from agents.parser_agent import extract_signals
from services.html_parser import parse_html


def test_basic_signals(soup_builder):
    soup = soup_builder(
        title="  My Page  ",
        meta_description="A description",
        h1s=[" Main "],
        h2s=["First", "Second"],
        h3s=["Sub"],
        word_count=10,
        external_links=3,
    )
    signals = extract_signals(soup)

    assert signals.title == "My Page"
    assert signals.meta_description == "A description"
    assert signals.h1s == ("Main",)
    assert signals.h2s == ("First", "Second")
    assert signals.h3s == ("Sub",)
    # 10 paragraph words + 4 heading words + 3 link texts
    assert signals.word_count == 17
    assert signals.external_link_count == 3
    assert not signals.has_table
    assert not signals.has_percent_data


def test_missing_signals_default_to_empty():
    signals = extract_signals(parse_html("<html><body></body></html>"))

    assert signals.title == ""
    assert signals.meta_description == ""
    assert signals.h1s == ()
    assert signals.word_count == 0
    assert signals.schema_types == ()


def test_only_absolute_links_count_as_external():
    html = (
        "<body>"
        '<a href="/about">a</a>'
        '<a href="#top">b</a>'
        '<a href="http://x.example">c</a>'
        '<a href="https://y.example">d</a>'
        "<a>e</a>"
        "</body>"
    )
    assert extract_signals(parse_html(html)).external_link_count == 2


def test_table_and_percent_detection(soup_builder):
    soup = soup_builder(body_extra="<table><tr><td>Growth 42%</td></tr></table>")
    signals = extract_signals(soup)

    assert signals.has_table
    assert signals.has_percent_data


def test_percent_sign_without_digits_is_not_data(soup_builder):
    assert not extract_signals(soup_builder(body_extra="<p>100 percent, % sign</p>")).has_percent_data


def test_schema_flags_flow_into_signals(soup_builder):
    soup = soup_builder(schemas=[{"@type": "FAQPage"}, {"@type": "Article"}], raw_blocks=["{bad"])
    signals = extract_signals(soup)

    assert signals.schema_types == ("FAQPage", "Article")
    assert signals.has_faq
    assert signals.has_article
    assert not signals.has_how_to


def test_extraction_is_idempotent(soup_builder):
    soup = soup_builder(title="T", h1s=["H"], word_count=50, schemas=[{"@type": "HowTo"}])
    first = extract_signals(soup)
    second = extract_signals(soup)

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()
