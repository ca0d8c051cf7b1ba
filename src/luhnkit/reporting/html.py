from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional
from jinja2 import Environment, PackageLoader, select_autoescape
from ..engine.pipeline import ScanResult


def summarize(result: ScanResult) -> Dict[str, int]:
    """Per-reason counts of invalid candidates, plus the valid total."""
    counts: Dict[str, int] = {"valid": result.candidates - result.invalid}
    for ff in result.findings:
        for f in ff.findings:
            if f.valid:
                continue
            # "invalid symbol 'x' at position 3" -> "invalid symbol"
            kind = (f.reason or "unknown").split(" in ")[0].split(" '")[0]
            counts[kind] = counts.get(kind, 0) + 1
    return counts


def render_report(result: ScanResult, engine: str = "decimal", generated_at: Optional[datetime] = None) -> str:
    env = Environment(
        loader=PackageLoader("luhnkit.reporting", "templates"),
        autoescape=select_autoescape(("html", "j2"))
    )
    tmpl = env.get_template("report.html.j2")
    stamp = (generated_at or datetime.now(timezone.utc)).isoformat(timespec="seconds")
    return tmpl.render(result=result, engine=engine, summary=summarize(result), generated_at=stamp)


def write_report(result: ScanResult, path: Path, engine: str = "decimal") -> None:
    html = render_report(result, engine=engine)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html)
