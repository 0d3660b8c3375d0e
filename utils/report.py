"""Per-trial reporting.

A SuiteReport hands out one TrialReport per trial; the trial receives its
report as an argument and never looks up another trial's report.
"""

import platform
import threading
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger
from pydantic import BaseModel, Field, PrivateAttr


class Status(str, Enum):
    INFO = "INFO"
    PASS = "PASS"
    FAIL = "FAIL"
    SKIP = "SKIP"


class ReportEntry(BaseModel):
    status: Status
    message: str
    timestamp: datetime = Field(default_factory=datetime.now)
    screenshot: Optional[str] = None


class TrialReport(BaseModel):
    name: str
    description: str = ""
    started_at: datetime = Field(default_factory=datetime.now)
    entries: List[ReportEntry] = Field(default_factory=list)

    @property
    def status(self) -> Status:
        statuses = {entry.status for entry in self.entries}
        for status in (Status.FAIL, Status.PASS, Status.SKIP):
            if status in statuses:
                return status
        return Status.INFO

    def _log(self, status: Status, message: str, screenshot: Optional[str] = None) -> ReportEntry:
        entry = ReportEntry(status=status, message=message, screenshot=screenshot)
        self.entries.append(entry)
        level = {Status.FAIL: "ERROR", Status.SKIP: "WARNING", Status.PASS: "SUCCESS"}.get(status, "INFO")
        logger.bind(trial=self.name).log(level, message)
        return entry

    def info(self, message: str) -> ReportEntry:
        return self._log(Status.INFO, message)

    def pass_(self, message: str) -> ReportEntry:
        return self._log(Status.PASS, message)

    def fail(self, message: str, screenshot: Optional[str] = None) -> ReportEntry:
        return self._log(Status.FAIL, message, screenshot)

    def skip(self, message: str) -> ReportEntry:
        return self._log(Status.SKIP, message)

    def attach_screenshot(self, screenshot_path: str) -> Optional[ReportEntry]:
        if not screenshot_path:
            return None
        return self._log(Status.INFO, "Screenshot attached", screenshot_path)


class SuiteReport(BaseModel):
    name: str = "NopCommerce Automation Test Report"
    system_info: Dict[str, str] = Field(default_factory=lambda: {"OS": platform.system()})
    started_at: datetime = Field(default_factory=datetime.now)
    trials: List[TrialReport] = Field(default_factory=list)

    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    def start_trial(self, name: str, description: str = "") -> TrialReport:
        trial = TrialReport(name=name, description=description or name)
        with self._lock:
            self.trials.append(trial)
        trial.info(f"Test execution started: {name}")
        return trial

    def summary(self) -> Dict[str, int]:
        with self._lock:
            trials = list(self.trials)
        counts = {status.value: 0 for status in Status}
        for trial in trials:
            counts[trial.status.value] += 1
        counts["TOTAL"] = len(trials)
        return counts

    @property
    def has_failures(self) -> bool:
        return self.summary()[Status.FAIL.value] > 0

    def write(self, directory: str | Path) -> Path:
        """Write the report as JSON and return its path."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        report_path = directory / f"TestReport_{timestamp}.json"

        with self._lock:
            payload = self.model_dump_json(indent=2)
        report_path.write_text(payload, encoding="utf-8")

        logger.info(f"Report written to {report_path}: {self.summary()}")
        return report_path
