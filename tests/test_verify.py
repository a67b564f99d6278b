import subprocess
from pathlib import Path
from unittest import mock

import pytest

from drillrunner.exercise import Exercise, Mode
from drillrunner.verify import VerificationFailed, prompt_for_completion, test, verify

PENDING_SOURCE = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED_SOURCE = "// fake_exercise\n\nfn main() {\n\n}\n"


def make_runner(compile_code=0, run_code=0, stdout=b"", stderr=b""):
    def runner(args, **kwargs):
        if args[0] in ("rustc", "cargo"):
            return subprocess.CompletedProcess(args, compile_code, b"", stderr)
        return subprocess.CompletedProcess(args, run_code, stdout, stderr)

    return runner


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NO_EMOJI", raising=False)
    return tmp_path


def exercise_at(directory: Path, name: str, source: str, mode=Mode.COMPILE, hint=""):
    path = directory / f"{name}.rs"
    path.write_text(source)
    return Exercise(name=name, path=path, mode=mode, hint=hint)


def test_prompt_for_done_exercise_returns_true(workdir, capsys):
    exercise = exercise_at(workdir, "finished_exercise", FINISHED_SOURCE)
    assert prompt_for_completion(exercise, None, False) is True
    assert "Successfully" not in capsys.readouterr().out


def test_prompt_for_pending_exercise_shows_context(workdir, capsys):
    exercise = exercise_at(workdir, "pending_exercise", PENDING_SOURCE)
    assert prompt_for_completion(exercise, None, False) is False
    out = capsys.readouterr().out
    assert "Successfully ran" in out
    assert "// I AM NOT DONE" in out
    assert "You can keep working on this exercise," in out


def test_prompt_shows_output_and_hints(workdir, capsys):
    exercise = exercise_at(workdir, "pending_exercise", PENDING_SOURCE, hint="look closer")
    assert prompt_for_completion(exercise, "program said hi", True) is False
    out = capsys.readouterr().out
    assert "Output:" in out
    assert "program said hi" in out
    assert "Hints:" in out
    assert "look closer" in out


def test_prompt_without_emoji(workdir, capsys, monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    exercise = exercise_at(workdir, "pending_exercise", PENDING_SOURCE)
    assert prompt_for_completion(exercise) is False
    assert "~*~ The code is compiling! ~*~" in capsys.readouterr().out


def test_verify_all_done_reports_progress(workdir, capsys):
    exercises = [
        exercise_at(workdir, "first", FINISHED_SOURCE),
        exercise_at(workdir, "second", FINISHED_SOURCE),
    ]
    with mock.patch("subprocess.run", side_effect=make_runner()) as run:
        verify(exercises, (0, len(exercises)), False, False)
    out = capsys.readouterr().out
    assert "Progress:" in out
    assert "2/2" in out
    assert run.call_count == 4


def test_verify_compile_failure_raises(workdir, capsys):
    exercises = [exercise_at(workdir, "broken", FINISHED_SOURCE)]
    runner = make_runner(compile_code=1, stderr=b"expected expression")
    with mock.patch("subprocess.run", side_effect=runner):
        with pytest.raises(VerificationFailed) as info:
            verify(exercises, (0, 1), False, False)
    assert info.value.exercise is exercises[0]
    out = capsys.readouterr().out
    assert "Compiling of" in out
    assert "expected expression" in out


def test_verify_stops_at_pending_exercise(workdir):
    done = exercise_at(workdir, "done", FINISHED_SOURCE)
    pending = exercise_at(workdir, "pending", PENDING_SOURCE)
    later = exercise_at(workdir, "later", FINISHED_SOURCE)
    with mock.patch("subprocess.run", side_effect=make_runner()) as run:
        with pytest.raises(VerificationFailed) as info:
            verify([done, pending, later], (0, 3), False, False)
    assert info.value.exercise is pending
    assert run.call_count == 4


def test_verify_run_failure_in_test_mode(workdir, capsys):
    exercise = exercise_at(workdir, "testFailure", FINISHED_SOURCE, mode=Mode.TEST)
    runner = make_runner(run_code=101, stdout=b"assertion failed")
    with mock.patch("subprocess.run", side_effect=runner):
        with pytest.raises(VerificationFailed):
            verify([exercise], (0, 1), False, False)
    out = capsys.readouterr().out
    assert "Testing of" in out
    assert "assertion failed" in out


def test_test_raises_on_failing_harness(workdir):
    exercise = exercise_at(workdir, "testNotPassed", FINISHED_SOURCE, mode=Mode.TEST)
    with mock.patch("subprocess.run", side_effect=make_runner(run_code=101)):
        with pytest.raises(VerificationFailed) as info:
            test(exercise, False)
    assert info.value.exercise is exercise


def test_test_verbose_shows_output(workdir, capsys):
    exercise = exercise_at(workdir, "testSuccess", FINISHED_SOURCE, mode=Mode.TEST)
    runner = make_runner(stdout=b"THIS TEST TOO SHALL PASS")
    with mock.patch("subprocess.run", side_effect=runner) as run:
        test(exercise, True)
    assert "THIS TEST TOO SHALL PASS" in capsys.readouterr().out
    assert "--show-output" in run.call_args_list[-1].args[0]


def test_test_quiet_hides_output(workdir, capsys):
    exercise = exercise_at(workdir, "testSuccess", FINISHED_SOURCE, mode=Mode.TEST)
    runner = make_runner(stdout=b"THIS TEST TOO SHALL PASS")
    with mock.patch("subprocess.run", side_effect=runner) as run:
        test(exercise, False)
    assert "THIS TEST TOO SHALL PASS" not in capsys.readouterr().out
    assert run.call_count == 2


def test_test_does_not_prompt_for_pending(workdir, capsys):
    exercise = exercise_at(workdir, "pending_test_exercise", PENDING_SOURCE, mode=Mode.TEST)
    with mock.patch("subprocess.run", side_effect=make_runner()) as run:
        test(exercise, False)
    assert "I AM NOT DONE" not in capsys.readouterr().out
    assert run.call_args_list[0].args[0][:2] == ["rustc", "--test"]