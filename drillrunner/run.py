"""Running a single exercise and resetting it."""

from __future__ import annotations

import subprocess

from rich.console import Console

from .exercise import Exercise, ExerciseFailed, Mode
from .ui import success, warn
from .verify import VerificationFailed, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run one exercise, raising VerificationFailed on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> subprocess.Popen:
    """Stash the changes made to the exercise file with git."""
    return subprocess.Popen(["git", "stash", "--", str(exercise.path)])


def _compile_and_run(exercise: Exercise) -> None:
    status = Console(stderr=True).status(f"Compiling {exercise}...")
    status.start()
    try:
        try:
            compiled = exercise.compile()
        except ExerciseFailed as failure:
            status.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(failure.output.stderr)
            raise VerificationFailed(exercise) from failure

        with compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as failure:
                status.stop()
                print(failure.output.stdout)
                print(failure.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise VerificationFailed(exercise) from failure
            status.stop()
            print(output.stdout)
            success(f"Successfully ran {exercise}")
    finally:
        status.stop()