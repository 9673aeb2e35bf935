from __future__ import annotations

import datetime as _dt
import html
import json
import re
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any

from loguru import logger

_active_reporter: TestRunReporter | None = None

OUTCOMES = ("passed", "failed", "skipped", "xfailed", "xpassed")


def set_active_reporter(reporter: TestRunReporter | None) -> None:
    """Install (or clear, with None) the reporter that receives narrated steps."""
    global _active_reporter
    _active_reporter = reporter


def get_active_reporter() -> TestRunReporter | None:
    return _active_reporter


def add_info_to_report(message: str) -> None:
    """
    Narrate a user-facing action. The message is always logged; when a run
    reporter is active it is also attached to the current test's steps.
    """
    logger.info(message)
    if _active_reporter is not None:
        _active_reporter.add_step(message)


def _slug(nodeid: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]+", "_", nodeid)


@dataclass
class TestResult:
    __test__ = False  # not a pytest test class

    nodeid: str
    outcome: str
    duration: float = 0.0
    screenshot: str | None = None
    message: str | None = None
    steps: list[str] = field(default_factory=list)


class TestRunReporter:
    """
    Per-run report of scenario outcomes.

    Each test gets the steps narrated while it ran, a screenshot of the
    browser at the end of its call stage, and the failure text if any.
    Everything lands under ``reports/<timestamp>/``: ``run.log`` (written by
    the logging setup), ``report.json``, ``report.html`` and ``screenshots/``.
    """

    __test__ = False

    def __init__(self, repo_root: Path | None = None) -> None:
        root = repo_root or Path(__file__).resolve().parents[1]
        self.started_at = _dt.datetime.now()
        self.run_dir = root / "reports" / f"{self.started_at:%Y-%m-%d_%H-%M-%S}"
        self.screenshots_dir = self.run_dir / "screenshots"
        self.screenshots_dir.mkdir(parents=True, exist_ok=True)

        self.report_path: Path | None = None
        self._results: dict[str, TestResult] = {}
        self._pending_steps: list[str] = []

    @property
    def log_path(self) -> Path:
        return self.run_dir / "run.log"

    @property
    def results(self) -> list[TestResult]:
        return list(self._results.values())

    def add_step(self, message: str) -> None:
        self._pending_steps.append(message)

    def record(self, item: Any, report: Any, driver: Any | None, *, stage: str) -> None:
        """
        Merge one pytest stage report (setup/call/teardown) into the test's
        result. The call stage owns duration and screenshot; a failing
        setup or teardown only overrides outcome and message.
        """
        steps, self._pending_steps = self._pending_steps, []
        previous = self._results.get(item.nodeid) or TestResult(item.nodeid, "unknown")

        result = replace(
            previous,
            outcome=_outcome(report),
            message=_failure_text(report) or previous.message,
            steps=previous.steps + steps,
        )
        if stage == "call" or not previous.duration:
            result.duration = getattr(report, "duration", 0.0) or 0.0
        if stage == "call" and driver is not None:
            result.screenshot = self._screenshot(result, driver)

        self._results[item.nodeid] = result

    def finalize(self) -> Path:
        """Write report.json and report.html once; later calls return the same path."""
        if self.report_path is None:
            finished_at = _dt.datetime.now()
            self._write_json(finished_at)
            self.report_path = self._write_html(finished_at)
            logger.debug(f"Report written to {self.report_path}")
        return self.report_path

    def summary(self) -> dict[str, int]:
        counts = dict.fromkeys(OUTCOMES, 0)
        for res in self._results.values():
            if res.outcome in counts:
                counts[res.outcome] += 1
        return counts

    def _screenshot(self, result: TestResult, driver: Any) -> str | None:
        path = self.screenshots_dir / f"{_slug(result.nodeid)}.png"
        try:
            saved = driver.save_screenshot(str(path))
        except Exception as exc:  # pragma: no cover - the browser may already be gone
            logger.warning(f"Screenshot for {result.nodeid} failed: {exc}")
            saved, reason = False, str(exc)
        else:
            reason = "save_screenshot returned False"
        if saved:
            return path.relative_to(self.run_dir).as_posix()
        result.message = "\n".join(filter(None, [result.message, f"(Screenshot error: {reason})"]))
        return None

    def _write_json(self, finished_at: _dt.datetime) -> None:
        payload = {
            "started_at": self.started_at.isoformat(),
            "finished_at": finished_at.isoformat(),
            "summary": self.summary(),
            "results": [asdict(r) for r in self._results.values()],
        }
        (self.run_dir / "report.json").write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def _write_html(self, finished_at: _dt.datetime) -> Path:
        counts = "".join(
            f"<span class='count {name}'>{name}: {n}</span>" for name, n in self.summary().items()
        )
        sections = "\n".join(_result_html(r) for r in self._results.values()) or "<p class='none'>No tests collected.</p>"
        page = _PAGE.format(
            started=f"{self.started_at:%Y-%m-%d %H:%M:%S}",
            finished=f"{finished_at:%Y-%m-%d %H:%M:%S}",
            total=len(self._results),
            counts=counts,
            sections=sections,
        )
        path = self.run_dir / "report.html"
        path.write_text(page, encoding="utf-8")
        return path


def _outcome(report: Any) -> str:
    if getattr(report, "wasxfail", False):
        return "xfailed" if getattr(report, "skipped", False) else "xpassed"
    return getattr(report, "outcome", "unknown")


def _failure_text(report: Any) -> str | None:
    if not (getattr(report, "failed", False) or getattr(report, "skipped", False)):
        return None
    return (getattr(report, "longreprtext", "") or "").strip() or None


def _result_html(res: TestResult) -> str:
    esc = html.escape
    parts = [
        f"<section class='result {esc(res.outcome)}'>",
        f"<h2><span class='badge'>{esc(res.outcome)}</span> {esc(res.nodeid)} <small>{res.duration:.2f}s</small></h2>",
    ]
    if res.steps:
        parts.append("<ol class='steps'>" + "".join(f"<li>{esc(s)}</li>" for s in res.steps) + "</ol>")
    if res.message:
        parts.append(f"<pre>{esc(res.message)}</pre>")
    if res.screenshot:
        src = esc(res.screenshot)
        parts.append(f"<a href='{src}'><img src='{src}' alt='screenshot of {esc(res.nodeid)}'></a>")
    parts.append("</section>")
    return "\n".join(parts)


_PAGE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>TheFork UI Test Report - {started}</title>
<style>
  body {{ font-family: Helvetica, Arial, sans-serif; max-width: 1100px; margin: 2em auto; color: #222; }}
  header p {{ color: #555; }}
  .count {{ margin-right: 1em; font-weight: bold; }}
  .result {{ border-left: 6px solid #bbb; padding: 0.5em 1em; margin: 1em 0; background: #fafafa; }}
  .result.passed {{ border-color: #2e8b57; }}
  .result.failed {{ border-color: #c0392b; background: #fff5f4; }}
  .result.skipped, .result.xfailed {{ border-color: #999; }}
  .result.xpassed {{ border-color: #d68910; }}
  .badge {{ text-transform: uppercase; font-size: 0.7em; padding: 2px 6px; background: #eee; }}
  h2 {{ font-size: 1em; }}
  h2 small {{ color: #777; font-weight: normal; }}
  .steps li {{ margin: 2px 0; }}
  pre {{ white-space: pre-wrap; background: #f0f0f0; padding: 0.5em; }}
  img {{ max-width: 360px; border: 1px solid #ccc; }}
  .none {{ color: #777; }}
</style>
</head>
<body>
<header>
  <h1>TheFork UI Test Report</h1>
  <p>Started {started} &middot; finished {finished} &middot; {total} tests</p>
  <p>{counts}</p>
</header>
{sections}
</body>
</html>
"""
