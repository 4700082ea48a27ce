"""Running checks and fixes over repository files and reporting failures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from assetcheck.fields import CompositeError
from assetcheck.models import Fixer, Updater, Validator
from assetcheck.report import Report

_log = logging.getLogger(__name__)


class JobFailed(Exception):
    """A job finished with one or more errors; the message is the summary."""


def unwrap_composite(error: BaseException) -> list[BaseException]:
    """Flatten nested composite errors into the plain errors they hold."""
    if not isinstance(error, CompositeError):
        return [error]
    return [leaf for inner in error for leaf in unwrap_composite(inner)]


def _describe_path(item: Any) -> Mapping[str, Any]:
    return {"path": str(item)}


@dataclass
class JobRunner:
    """Applies validators, fixers and updaters to a set of items.

    When no validator or fixer source is given, items get no steps.
    """

    items: Sequence[Any] = field(default_factory=list)
    validators_for: Optional[Callable[[Any], Iterable[Validator]]] = None
    fixers_for: Optional[Callable[[Any], Iterable[Fixer]]] = None
    updaters: Sequence[Updater] = field(default_factory=list)
    describe: Callable[[Any], Mapping[str, Any]] = _describe_path
    report: Report = field(default_factory=Report)
    logger: logging.Logger = _log

    def run_job(self, job: Callable[[Any], None]) -> str:
        """Apply job to every item; raise JobFailed if any error was recorded."""
        for item in self.items:
            self.report.inc_total_files()
            job(item)

        summary = self.report.summary()
        if self.report.is_failed():
            self.logger.error(summary)
            raise JobFailed(summary)
        self.logger.info(summary)
        return summary

    def check(self, item: Any) -> None:
        if self.validators_for is None:
            return
        for validator in self.validators_for(item):
            try:
                validator.run(item)
            except Exception as err:  # any failure of a step is reported
                self._handle_error(err, item, validator.name)

    def fix(self, item: Any) -> None:
        if self.fixers_for is None:
            return
        for fixer in self.fixers_for(item):
            try:
                fixer.run(item)
            except Exception as err:
                self._handle_error(err, item, fixer.name)

    def run_update_auto(self) -> None:
        for updater in self.updaters:
            try:
                updater.run()
            except Exception as err:
                self.logger.error("%s: %s", updater.name, err)

    def _handle_error(self, error: BaseException, item: Any, step_name: str) -> None:
        context = dict(self.describe(item))
        context["validation"] = step_name
        details = " ".join(f"{key}={value}" for key, value in context.items())
        for err in unwrap_composite(error):
            self.logger.error("%s [%s]", err, details)
            self.report.inc_errors()