import os
import shutil
import stat

import pytest

from lineshell.executor import Pipeline, PipelineState, report_status, run_pipeline, run_simple

posix_tools = pytest.mark.skipif(
    any(shutil.which(c) is None for c in ["printf", "sort", "head", "true", "false", "cat"]),
    reason="needs POSIX command line tools",
)


@posix_tools
def test_run_simple_success(capfd):
    assert run_simple(["printf", "hello\\n"]) == 0
    assert capfd.readouterr().out == "hello\n"


@posix_tools
def test_run_simple_nonzero_exit(capfd):
    assert run_simple(["false"]) == 1
    assert capfd.readouterr().out == "Error: Command exited with status 1\n"


def test_run_simple_command_not_found(capfd):
    assert run_simple(["lineshell-no-such-command"]) == 127
    assert capfd.readouterr().out == "Error: lineshell-no-such-command: command not found\n"


def test_run_simple_permission_denied(tmp_path, capfd):
    script = tmp_path / "script.sh"
    script.write_text("#!/bin/sh\necho hi\n")
    script.chmod(stat.S_IRUSR | stat.S_IWUSR)
    if os.access(script, os.X_OK):
        pytest.skip("running with privileges that ignore the execute bit")

    assert run_simple([str(script)]) == 126
    assert capfd.readouterr().out == f"Error: {script}: permission denied\n"


def test_report_status_signal(capsys):
    assert report_status(-9) == 137
    assert capsys.readouterr().out == "Error: Command terminated by signal SIGKILL\n"


def test_report_status_zero_is_silent(capsys):
    assert report_status(0) == 0
    assert capsys.readouterr().out == ""


@posix_tools
def test_pipeline_sorts(capfd):
    assert run_pipeline([["printf", "b\\na\\n"], ["sort"]]) == 0
    assert capfd.readouterr().out == "a\nb\n"


@posix_tools
def test_pipeline_three_stages(capfd):
    assert run_pipeline([["printf", "c\\nb\\na\\n"], ["sort"], ["head", "-n", "1"]]) == 0
    assert capfd.readouterr().out == "a\n"


@posix_tools
def test_pipeline_reports_last_stage_status(capfd):
    assert run_pipeline([["true"], ["false"]]) == 1
    assert capfd.readouterr().out == "Error: Command exited with status 1\n"


@posix_tools
def test_pipeline_ignores_earlier_stage_status(capfd):
    assert run_pipeline([["false"], ["true"]]) == 0
    assert capfd.readouterr().out == ""


@posix_tools
def test_pipeline_waits_for_every_stage(capfd):
    pipeline = Pipeline([["printf", "x\\n"], ["cat"], ["cat"]])
    assert pipeline.run() == 0
    assert pipeline.state is PipelineState.DONE
    assert len(pipeline.procs) == 3
    assert all(p.returncode is not None for p in pipeline.procs)
    assert capfd.readouterr().out == "x\n"


@posix_tools
def test_pipeline_skips_empty_stages(capfd):
    pipeline = Pipeline([["printf", "x\\n"], [], ["cat"]])
    assert pipeline.run() == 0
    assert len(pipeline.procs) == 2
    assert capfd.readouterr().out == "x\n"


@posix_tools
def test_pipeline_launch_failure_aborts(capfd):
    pipeline = Pipeline([["printf", "x\\n"], ["lineshell-no-such-command"], ["cat"]])
    assert pipeline.run() == 127
    assert pipeline.state is PipelineState.FAILED
    # the first stage was started and must have been reaped
    assert len(pipeline.procs) == 1
    assert pipeline.procs[0].returncode is not None
    assert capfd.readouterr().out == "Error: lineshell-no-such-command: command not found\n"


def test_pipeline_of_empty_stages_is_a_noop(capfd):
    pipeline = Pipeline([[], []])
    assert pipeline.run() == 0
    assert pipeline.procs == []
    assert capfd.readouterr().out == ""


def test_run_simple_null_byte_in_path(capfd):
    assert run_simple(["./a\x00b"]) == 126
    out = capfd.readouterr().out
    assert out.startswith("Error: ./a\x00b: ")
    assert "null" in out


def test_pipeline_null_byte_in_path_fails_cleanly(capfd):
    pipeline = Pipeline([["./a\x00b"], ["./c"]])
    assert pipeline.run() == 126
    assert pipeline.state is PipelineState.FAILED
    assert pipeline.procs == []
