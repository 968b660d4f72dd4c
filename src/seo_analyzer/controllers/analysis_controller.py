# src/seo_analyzer/controllers/analysis_controller.py
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import BaseModel, Field
from tqdm.auto import tqdm

from seo_analyzer.engine import AnalysisEngine, analyze
from seo_analyzer.model import AnalyzerConfig, Check

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("csv", "json")


class PageReport(BaseModel):
    """Analysis outcome of one page in a batch, keyed by where the page came from."""
    key: str
    score: int = 0
    level: str = "poor"
    checks: List[Check] = Field(default_factory=list)

    def count(self, status: str) -> int:
        return sum(1 for c in self.checks if c.status == status)


class AnalysisController:
    """
    Scores a batch of pages with a shared engine and turns the outcome into
    DataFrames for display or export.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None, show_progress: bool = True):
        self.config = config or AnalyzerConfig()
        self.show_progress = show_progress
        # Discovers rule groups up front so the progress bar measures analysis only
        self.engine = AnalysisEngine()

    def run(self, pages: Dict[str, Any]) -> List[PageReport]:
        """Analyzes every page; keys are kept as report identifiers (usually file names)."""
        reports: List[PageReport] = []
        items = list(pages.items())
        iterator = tqdm(items, desc="Analyzing", unit="page", leave=False) if self.show_progress else items

        for key, data in iterator:
            result = analyze(data, self.config)
            reports.append(PageReport(key=key, score=result.score, level=result.level, checks=result.checks))

        logger.info("Analyzed %d page(s)", len(reports))
        return reports

    @staticmethod
    def checks_frame(reports: List[PageReport]) -> pd.DataFrame:
        """One row per check, prefixed with the page key, score and level."""
        rows = [
            {
                "page": report.key,
                "score": report.score,
                "level": report.level,
                **check.model_dump(),
            }
            for report in reports
            for check in report.checks
        ]
        columns = ["page", "score", "level", "id", "group", "label", "status", "category", "weight", "message", "tip"]
        return pd.DataFrame(rows, columns=columns)

    @staticmethod
    def summary_frame(reports: List[PageReport]) -> pd.DataFrame:
        """One row per page with its score and check counts per status."""
        rows = [
            {
                "page": report.key,
                "score": report.score,
                "level": report.level,
                "checks": len(report.checks),
                "passed": report.count("pass"),
                "warnings": report.count("warning"),
                "failed": report.count("fail"),
            }
            for report in reports
        ]
        columns = ["page", "score", "level", "checks", "passed", "warnings", "failed"]
        return pd.DataFrame(rows, columns=columns)

    def export(self, reports: List[PageReport], path: Path, fmt: str = "csv") -> Path:
        """Writes every check of every report to `path` as CSV or JSON records."""
        if fmt not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported export format '{fmt}'. Use one of: {', '.join(EXPORT_FORMATS)}")

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        df = self.checks_frame(reports)

        if fmt == "csv":
            df.to_csv(path, index=False)
        else:
            df.to_json(path, orient="records", indent=2, force_ascii=False)

        logger.info("Exported %d check rows to %s", len(df), path)
        return path
