"""Checking exercises in order, with progress and completion prompts."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.status import Status
from rich.text import Text

from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from .ui import no_emoji, success, warn

_BAR_WIDTH = 60
_SEPARATOR = "===================="


class VerificationFailed(Exception):
    """An exercise did not compile, did not run cleanly, or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"verification of {exercise} failed")
        self.exercise = exercise


class _RunMode(enum.Enum):
    INTERACTIVE = enum.auto()
    NON_INTERACTIVE = enum.auto()


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False)


@contextmanager
def _spinner(message: str) -> Iterator[Status]:
    status = Console(stderr=True).status(message)
    status.start()
    try:
        yield status
    finally:
        status.stop()


def _show_progress(position: int, total: int, percentage: float) -> None:
    filled = min(_BAR_WIDTH * position // total, _BAR_WIDTH) if total else 0
    if filled >= _BAR_WIDTH:
        done, rest = "#" * _BAR_WIDTH, ""
    else:
        done, rest = "#" * filled + ">", "-" * (_BAR_WIDTH - filled - 1)
    _console().print(
        Text.assemble(
            "Progress: [",
            (done, "green"),
            (rest, "red"),
            f"] {position}/{total} ({percentage:.1f} %)",
        )
    )


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check each exercise in turn, raising VerificationFailed at the first that fails."""
    num_done, total = progress
    position = num_done
    percentage = num_done / total * 100.0 if total else 0.0
    _show_progress(position, total, percentage)
    for exercise in exercises:
        if not _check(exercise, verbose, success_hints):
            raise VerificationFailed(exercise)
        position += 1
        if total:
            percentage += 100.0 / total
        _show_progress(position, total, percentage)


def _check(exercise: Exercise, verbose: bool, success_hints: bool) -> bool:
    try:
        if exercise.mode is Mode.TEST:
            return _compile_and_test(exercise, _RunMode.INTERACTIVE, verbose, success_hints)
        if exercise.mode is Mode.COMPILE:
            return _compile_and_run_interactively(exercise, success_hints)
        return _compile_only(exercise, success_hints)
    except ExerciseFailed:
        return False


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise's test harness, raising VerificationFailed on failure."""
    try:
        _compile_and_test(exercise, _RunMode.NON_INTERACTIVE, verbose, False)
    except ExerciseFailed as failure:
        raise VerificationFailed(exercise) from failure


def _compile(exercise: Exercise, status: Status) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as failure:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(failure.output.stderr)
        raise


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        _compile(exercise, status).close()
    return prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                warn(f"Ran {exercise} with errors")
                print(failure.output.stdout)
                print(failure.output.stderr)
                raise
            status.stop()
            return prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, run_mode: _RunMode, verbose: bool, success_hints: bool
) -> bool:
    with _spinner(f"Testing {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(failure.output.stdout)
                raise
            status.stop()
            if verbose:
                print(output.stdout)
            if run_mode is _RunMode.INTERACTIVE:
                return prompt_for_completion(exercise, None, success_hints)
            return True


def prompt_for_completion(
    exercise: Exercise, prompt_output: str | None = None, success_hints: bool = False
) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is and return False."""
    state = exercise.state()
    if state.done():
        return True

    success(
        {
            Mode.COMPILE: f"Successfully ran {exercise}!",
            Mode.TEST: f"Successfully tested {exercise}!",
            Mode.CLIPPY: f"Successfully compiled {exercise}!",
        }[exercise.mode]
    )

    emoji_free = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if emoji_free
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    console = _console()
    separator = Text(_SEPARATOR, style="bold")

    print()
    if emoji_free:
        print(f"~*~ {success_message} ~*~")
    else:
        print(f"🎉 🎉  {success_message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(separator)
        print(prompt_output)
        console.print(separator)
        print()
    if success_hints:
        print("Hints:")
        console.print(separator)
        print(exercise.hint)
        console.print(separator)
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False