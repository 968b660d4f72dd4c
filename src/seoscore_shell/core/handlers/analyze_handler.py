# src/seoscore_shell/core/handlers/analyze_handler.py
import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from seo_analyzer.constants import SUPPORTED_LOCALES
from seo_analyzer.controllers.analysis_controller import EXPORT_FORMATS, AnalysisController, PageReport
from seoscore_shell.core.managers.config_manager import config_manager
from seoscore_shell.core.services.json_service import read_json, to_json
from seoscore_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

LEVEL_ICONS = {"excellent": "✅", "good": "✅", "ok": "⚠️", "poor": "❌"}
STATUS_ICONS = {"pass": "✅", "warning": "⚠️", "fail": "❌"}

analyze_help_text = """
  analyze <file|dir>... [--locale fr|en] [--disable GROUP ...] [--weight GROUP=N ...]
                        [--export PATH] [--format csv|json] [--details]
                      Scores JSON page files. A file holds one page object or a list of them.
                      Directories are scanned for *.json files (not recursive).
""".strip()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="seoscore analyze", description="Score page JSON files.")
    parser.add_argument("paths", nargs="+", help="JSON files or directories containing JSON files.")
    parser.add_argument("--locale", choices=SUPPORTED_LOCALES, help="Content language (default from settings).")
    parser.add_argument("--disable", nargs="+", default=[], metavar="GROUP", help="Rule groups to skip.")
    parser.add_argument("--weight", nargs="+", default=[], metavar="GROUP=N", help="Override group weights.")
    parser.add_argument("--export", metavar="PATH", help="Write every check to a CSV or JSON file.")
    parser.add_argument("--format", choices=EXPORT_FORMATS, help="Export format (default from settings).")
    parser.add_argument("--details", action="store_true", help="List the warnings and failures of each page.")
    return parser


def parse_weights(pairs: List[str]) -> Dict[str, float]:
    """'title=5' -> {'title': 5.0}. Raises ValueError on malformed pairs."""
    weights: Dict[str, float] = {}
    for pair in pairs:
        group, sep, raw = pair.partition("=")
        if not sep or not group.strip():
            raise ValueError(f"Expected GROUP=N, got '{pair}'")
        weights[group.strip()] = float(raw)
    return weights


def collect_files(paths: List[str]) -> Tuple[List[Path], List[str]]:
    """Expands directories to their JSON files. Returns (files, missing paths)."""
    files: List[Path] = []
    missing: List[str] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(sorted(path.glob("*.json")))
        elif path.is_file():
            files.append(path)
        else:
            missing.append(raw)
    return files, missing


def load_pages(files: List[Path]) -> Tuple[Dict[str, Any], int]:
    """
    Reads every file into a {key: page} mapping. Files that cannot be read are
    reported and skipped. Returns the pages and the number of failed files.
    """
    pages: Dict[str, Any] = {}
    errors = 0
    for path in files:
        try:
            data = read_json(path)
        except (OSError, json.JSONDecodeError) as e:
            print(f"❌ Could not read {path}: {e}")
            errors += 1
            continue

        if isinstance(data, dict):
            pages[str(path)] = data
        elif isinstance(data, list):
            for i, item in enumerate(data):
                pages[f"{path}[{i}]"] = item
        else:
            print(f"❌ {path} does not contain a page object or a list of pages.")
            errors += 1
    return pages, errors


def print_report(report: PageReport, details: bool = False) -> None:
    icon = LEVEL_ICONS.get(report.level, "")
    print(
        f"{icon} {report.key}: {report.score}/100 ({report.level}) - "
        f"{report.count('pass')} passed, {report.count('warning')} warnings, {report.count('fail')} failed"
    )
    if not details:
        return
    for check in report.checks:
        if check.status == "pass":
            continue
        print(f"    {STATUS_ICONS[check.status]} [{check.group}] {check.label}: {check.message}")
        if check.tip:
            print(f"       -> {check.tip}")


def export_reports(controller: AnalysisController, reports: List[PageReport], target: str, fmt: str) -> Path:
    path = PathUtils.resolve_export_path(target, config_manager.get_nested("export.output_dir"))
    if fmt == "json":
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = [report.model_dump() for report in reports]
        path.write_text(to_json(payload), encoding="utf-8")
        return path
    return controller.export(reports, path, fmt)


def handle_analyze(args: List[str], _stdin: Optional[str] = None) -> int:
    """
    Scores one or more page files and prints a summary line per page.

    Returns:
        0 when every file was analyzed, 1 on usage errors or unreadable files.
    """
    parser = _build_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit:
        return 1

    try:
        weights = parse_weights(parsed.weight)
    except ValueError as e:
        print(f"❌ Invalid --weight: {e}")
        return 1

    overrides: Dict[str, Any] = {"locale": parsed.locale}
    if parsed.disable:
        configured = config_manager.get_nested("analyzer.disabled_rules", []) or []
        overrides["disabled_rules"] = list(configured) + parsed.disable
    if weights:
        configured = config_manager.get_nested("analyzer.override_weights", {}) or {}
        overrides["override_weights"] = {**configured, **weights}

    try:
        analyzer_config = config_manager.analyzer_config(**overrides)
    except ValidationError as e:
        print(f"❌ Invalid analyzer configuration: {e}")
        return 1

    files, missing = collect_files(parsed.paths)
    for raw in missing:
        print(f"❌ Not found: {raw}")
    pages, errors = load_pages(files)
    errors += len(missing)

    if not pages:
        print("❌ No pages to analyze.")
        return 1

    controller = AnalysisController(analyzer_config)
    reports = controller.run(pages)
    for report in reports:
        print_report(report, details=parsed.details)

    if len(reports) > 1:
        average = sum(r.score for r in reports) / len(reports)
        print(f"Analyzed {len(reports)} pages, average score {average:.1f}/100.")

    if parsed.export:
        fmt = parsed.format or config_manager.get_nested("export.default_format", "csv")
        if fmt not in EXPORT_FORMATS:
            print(f"❌ Unsupported export format '{fmt}'.")
            return 1
        try:
            path = export_reports(controller, reports, parsed.export, fmt)
        except OSError as e:
            print(f"❌ Export failed: {e}")
            return 1
        print(f"✅ Exported {sum(len(r.checks) for r in reports)} checks to {path}")

    return 1 if errors else 0
