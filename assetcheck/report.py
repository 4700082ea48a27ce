"""Counters for files processed and errors found during a job."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Report:
    errors: int = 0
    total_files: int = 0

    def inc_errors(self) -> None:
        self.errors += 1

    def inc_total_files(self) -> None:
        self.total_files += 1

    def is_failed(self) -> bool:
        return self.errors > 0

    def summary(self) -> str:
        return f"Total files: {self.total_files}, errors: {self.errors}"