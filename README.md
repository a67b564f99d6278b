# drillrunner

drillrunner walks you through a course of small Rust exercises. Each exercise
is a source file with a mistake in it: a compile error, a failing test or a
lint. Fix it, remove the `I AM NOT DONE` marker, and move on to the next one.

You need `rustc` on your `PATH`. Exercises checked by lints also need
`cargo clippy`.

## Installing

```
pip install .
```

## Using it

Run every command from the course directory, the one that holds `info.toml`.
That file lists each exercise's `name`, `path`, `mode` (`compile`, `test` or
`clippy`) and `hint`.

```
drillrunner watch            # verify in order, then re-check whenever a file under ./exercises changes
drillrunner verify           # verify all exercises once, stopping at the first failure
drillrunner run NAME         # compile and run (or test) one exercise
drillrunner hint NAME        # print an exercise's hint
drillrunner reset NAME       # stash your changes to an exercise with "git stash"
drillrunner list             # show every exercise and whether it is Done or Pending
drillrunner lsp              # write rust-project.json so rust-analyzer understands the exercises
```

For `run`, `hint` and `reset`, the name `next` picks the first exercise that
still holds its `I AM NOT DONE` marker.

`list` accepts `--paths` or `--names` to print only paths or names,
`--filter a,b` to match names or paths, and `--solved` or `--unsolved` to
narrow the list; it ends with a progress line. `--nocapture`, given before the
command, shows the output of test exercises. `watch --success-hints` prints
the hint after an exercise succeeds.

In watch mode you can type `hint`, `clear`, `quit`, `help`, or `!<cmd>` to run
a command.

Set `NO_EMOJI` in the environment to get plain-text markers.

Commands exit with status 0 on success and 1 on failure, such as a failed
exercise, an unknown exercise name, or a missing `info.toml` or `rustc`.

## Library

The checker can be used from Python as well:

```python
from drillrunner.exercise import load_exercises
from drillrunner.verify import VerificationFailed, verify

exercises = load_exercises("info.toml")
try:
    verify(exercises, (0, len(exercises)), False, False)
except VerificationFailed as failure:
    print("stopped at", failure.exercise.name)
```

`Exercise.compile()` returns a `CompiledExercise` (a context manager that
removes the built binary) and raises `ExerciseFailed` with the compiler
output. `Exercise.state()` reports where the pending marker is, and
`Exercise.looks_done()` whether it has been removed.
`drillrunner.project.RustAnalyzerProject` builds the rust-project.json data.

`drillrunner.drills` holds worked solutions to many of the course exercises,
written as plain Python: `quizzes`, `basics`, `sequences`, `structs`,
`errors`, `iterators`, `hashmaps`, `traits`, `messages` and `containers`.

## What it does not include

The package does not ship a course: no exercise files and no `info.toml`.
Point it at a course directory of your own. The drills cover only part of a
typical course; topics such as type conversions have no worked solutions here.

## Tests

```
pip install .[test]
pytest
```