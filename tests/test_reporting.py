from datetime import datetime, timezone

import pytest

from luhnkit.config import LuhnConfig
from luhnkit.engine.pipeline import Pipeline
from luhnkit.reporting.html import render_report, summarize, write_report


@pytest.fixture
def result(tmp_path):
    src = tmp_path / "values.txt"
    src.write_text("4111111111111111\n4111111111111121\n41x1\n<b>1</b>\n")
    return Pipeline(LuhnConfig()).scan_path(src)


def test_summarize_groups_reasons(result):
    counts = summarize(result)
    assert counts["valid"] == 1
    assert counts["check digit mismatch"] == 1
    assert counts["invalid symbol"] == 2


def test_render_includes_timestamp_and_summary(result):
    stamp = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    html = render_report(result, engine="decimal", generated_at=stamp)
    assert "generated 2026-01-02T03:04:05+00:00" in html
    assert "<td>check digit mismatch</td><td>1</td>" in html
    assert "<td>invalid symbol</td><td>2</td>" in html


def test_values_are_escaped(result):
    html = render_report(result)
    assert "<b>1</b>" not in html
    assert "&lt;b&gt;1&lt;/b&gt;" in html


def test_write_report_creates_parents(result, tmp_path):
    out = tmp_path / "a" / "b" / "report.html"
    write_report(result, out, engine="decimal")
    assert "luhnkit scan report" in out.read_text()
