import logging

import pytest

from assetcheck.fields import CompositeError, InvalidFieldError, MissingFieldError
from assetcheck.models import Fixer, Updater, Validator
from assetcheck.runner import JobFailed, JobRunner, unwrap_composite


def test_unwrap_plain_error():
    err = ValueError("bad")
    assert unwrap_composite(err) == [err]


def test_unwrap_nested_composite():
    a = InvalidFieldError("a")
    b = MissingFieldError("b")
    c = ValueError("c")
    nested = CompositeError([a, CompositeError([b, c])])
    assert unwrap_composite(nested) == [a, b, c]


def test_unwrap_empty_composite():
    assert unwrap_composite(CompositeError()) == []


def test_check_job_passes_when_validators_succeed():
    seen = []
    runner = JobRunner(
        items=["a", "b"],
        validators_for=lambda item: [Validator(name="ok", run=seen.append)],
    )
    summary = runner.run_job(runner.check)
    assert seen == ["a", "b"]
    assert summary == runner.report.summary()
    assert runner.report.total_files == 2
    assert not runner.report.is_failed()


def test_check_counts_each_unwrapped_error(caplog):
    def failing(item):
        raise CompositeError([InvalidFieldError("x"), MissingFieldError("y")])

    runner = JobRunner(
        items=["only"],
        validators_for=lambda item: [Validator(name="composite", run=failing)],
    )
    with caplog.at_level(logging.ERROR, logger="assetcheck.runner"):
        with pytest.raises(JobFailed) as exc:
            runner.run_job(runner.check)
    assert runner.report.errors == 2
    assert str(exc.value) == runner.report.summary()
    assert "validation=composite" in caplog.text
    assert "path=only" in caplog.text


def test_all_validators_run_after_failure():
    calls = []

    def bad(item):
        calls.append("bad")
        raise OSError("cannot read")

    runner = JobRunner(
        items=["f"],
        validators_for=lambda item: [
            Validator(name="first", run=bad),
            Validator(name="second", run=lambda i: calls.append("good")),
        ],
    )
    runner.check("f")
    assert calls == ["bad", "good"]
    assert runner.report.errors == 1


def test_fix_uses_fixers():
    fixed = []

    def explode(item):
        raise ValueError("broken")

    runner = JobRunner(
        items=["x", "y"],
        fixers_for=lambda item: [Fixer(name="fix", run=fixed.append)]
        + ([Fixer(name="boom", run=explode)] if item == "y" else []),
    )
    with pytest.raises(JobFailed):
        runner.run_job(runner.fix)
    assert fixed == ["x", "y"]
    assert runner.report.errors == 1
    assert runner.report.total_files == 2


def test_run_update_auto_logs_and_continues(caplog):
    ran = []

    def broken():
        raise RuntimeError("offline")

    runner = JobRunner(
        updaters=[
            Updater(name="broken", run=broken),
            Updater(name="fine", run=lambda: ran.append("fine")),
        ]
    )
    with caplog.at_level(logging.ERROR, logger="assetcheck.runner"):
        runner.run_update_auto()
    assert ran == ["fine"]
    assert "offline" in caplog.text
    assert runner.report.errors == 0


def test_describe_fields_appear_in_log(caplog):
    runner = JobRunner(
        items=["p"],
        validators_for=lambda item: [
            Validator(name="v", run=lambda i: (_ for _ in ()).throw(ValueError("nope")))
        ],
        describe=lambda item: {"chain": "ethereum", "path": item},
    )
    with caplog.at_level(logging.ERROR, logger="assetcheck.runner"):
        runner.check("p")
    assert "chain=ethereum" in caplog.text
    assert "nope" in caplog.text
    assert runner.report.errors == 1