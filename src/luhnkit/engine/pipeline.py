"""
Batch checking: normalize candidates, run an engine, collect findings.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Dict, Iterable, List, Optional

import structlog

from .. import alphanum, decimal, expanded
from ..config import LuhnConfig
from .normalizers import apply_normalizers

log = structlog.get_logger()

# Engines selectable by name from config / CLI
ENGINES: Dict[str, ModuleType] = {
    "decimal": decimal,
    "alphanum": alphanum,
    "expanded": expanded,
}


def get_engine(name: str) -> ModuleType:
    try:
        return ENGINES[name]
    except KeyError:
        raise ValueError(f"unknown engine {name!r}; choose one of {', '.join(ENGINES)}") from None


@dataclass
class Finding:
    """Outcome of checking one candidate value."""
    value: str
    normalized: str
    valid: bool
    reason: Optional[str] = None
    line: Optional[int] = None


@dataclass
class FileFinding:
    path: str
    findings: List[Finding]


@dataclass
class ScanResult:
    files: int
    candidates: int
    invalid: int
    findings: List[FileFinding]


class Pipeline:
    """
    Runs one engine over many candidates, applying the configured normalizers
    first. Engines stay strict; all leniency lives here.
    """

    def __init__(self, cfg: LuhnConfig, engine: Optional[str] = None) -> None:
        self.cfg = cfg
        self.engine_name = engine or cfg.engine
        self.engine = get_engine(self.engine_name)
        self._normalizers = cfg.normalize.names()

    # ---------------- Public API ----------------

    def check_value(self, value: str, line: Optional[int] = None) -> Finding:
        norm = apply_normalizers(value, self._normalizers)
        if self.engine.valid(norm):
            return Finding(value, norm, True, line=line)
        try:
            self.engine.ensure_valid(norm)
        except ValueError as e:
            reason = str(e)
        else:  # pragma: no cover - valid() and ensure_valid() agree
            reason = None
        return Finding(value, norm, False, reason=reason, line=line)

    def checksum_value(self, body: str) -> str:
        """Return ``body`` (normalized) with its check digit appended; raises LuhnError."""
        norm = apply_normalizers(body, self._normalizers)
        return norm + self.engine.checksum_or_raise(norm)

    def scan_text(self, text: str) -> List[Finding]:
        """Check every candidate line of ``text``."""
        findings: List[Finding] = []
        for lineno, raw in enumerate(text.splitlines(), start=1):
            if not self._is_candidate(raw):
                continue
            findings.append(self.check_value(raw, line=lineno))
        return findings

    def scan_path(self, src: Path) -> ScanResult:
        """Scan a file or an entire directory tree."""
        findings: List[FileFinding] = []
        files = 0
        candidates = 0
        invalid = 0
        for p in self._iter_files(src):
            try:
                text = p.read_text(errors="ignore")
            except OSError as e:
                log.warning("scan_skipped", path=str(p), error=str(e))
                continue
            files += 1
            found = self.scan_text(text)
            log.debug("scan_file", path=str(p), candidates=len(found))
            candidates += len(found)
            invalid += sum(1 for f in found if not f.valid)
            if found:
                findings.append(FileFinding(str(p), found))
        return ScanResult(files=files, candidates=candidates, invalid=invalid, findings=findings)

    # --------------- Internals ------------------

    def _is_candidate(self, raw: str) -> bool:
        stripped = raw.strip()
        if not stripped:
            return not self.cfg.scan.skip_blank
        prefix = self.cfg.scan.comment_prefix
        return not (prefix and stripped.startswith(prefix))

    def _iter_files(self, src: Path) -> Iterable[Path]:
        if src.is_file():
            yield src
            return
        for p in sorted(src.rglob("*")):
            if p.is_file():
                yield p
