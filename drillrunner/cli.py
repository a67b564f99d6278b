"""Command-line interface: listing, running, verifying and watching exercises."""

from __future__ import annotations

import argparse
import enum
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .project import RustAnalyzerProject
from .run import reset, run
from .ui import no_emoji
from .verify import VerificationFailed, verify

PROGRAM = "drillrunner"

WELCOME = f"""       welcome to...

   {PROGRAM}
   ==========="""

DEFAULT_OUT = f"""Thanks for installing {PROGRAM}!

Is this your first time? Don't worry, the exercises are made for beginners.
A few notes about how things work:

1. The central idea is that you solve exercises. Most of them contain a syntax
   or logic error that makes them fail to compile or to pass their tests.
   Find the error and fix it. Once it is fixed, the exercise compiles and
   you can move on to the next one.
2. In watch mode (recommended) the first unfinished exercise is checked right
   away. An error message popping up at once is part of the exercise: open the
   exercise file in an editor and start your detective work!
3. If you are stuck, type 'hint' in watch mode, or run `{PROGRAM} hint <name>`.
4. To use rust-analyzer with the exercises, run `{PROGRAM} lsp`.

Got all that? Great! To get started, run `{PROGRAM} watch` to get the first
exercise. Make sure to have your editor open!"""

FINISH_LINE = """+----------------------------------------------------+
|            You made it to the finish line!         |
+----------------------------------------------------+

We hope you enjoyed learning about the various aspects of Rust!
You can also contribute your own exercises to help others."""

WATCH_HELP = """Commands available to you in watch mode:
  hint   - prints the current exercise's hint
  clear  - clears the screen
  quit   - quits watch mode
  !<cmd> - executes a command, like `!rustc --explain E0381`
  help   - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = enum.auto()
    UNFINISHED = enum.auto()


def _version() -> str:
    try:
        return version(PROGRAM)
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="A collection of small exercises to get you used to writing and reading Rust code.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    parser.add_argument(
        "--nocapture", action="store_true", help="Show outputs from the test exercises"
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.add_parser("verify", help="Verify all exercises according to the recommended order")
    watch_parser = commands.add_parser("watch", help="Rerun `verify` when files were edited")
    watch_parser.add_argument(
        "--success-hints", action="store_true", help="Show hints on success"
    )
    for name, text in (
        ("run", "Run/Test a single exercise"),
        ("reset", 'Reset a single exercise using "git stash -- <filename>"'),
        ("hint", "Return a hint for the given exercise"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("name", help="The name of the exercise")
    list_parser = commands.add_parser("list", help="List the exercises available")
    list_parser.add_argument(
        "-p", "--paths", action="store_true", help="Show only the paths of the exercises"
    )
    list_parser.add_argument(
        "-n", "--names", action="store_true", help="Show only the names of the exercises"
    )
    list_parser.add_argument(
        "-f",
        "--filter",
        default=None,
        help="Provide a string to match exercise names. Comma separated patterns are accepted",
    )
    list_parser.add_argument(
        "-u", "--unsolved", action="store_true", help="Display only exercises not yet solved"
    )
    list_parser.add_argument(
        "-s", "--solved", action="store_true", help="Display only exercises that have been solved"
    )
    commands.add_parser("lsp", help="Enable rust-analyzer for exercises")
    return parser


def rustc_exists() -> bool:
    """Whether `rustc --version` can be run successfully."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return result.returncode == 0


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """Find an exercise by name; "next" is the first unfinished one. Raises LookupError."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise LookupError(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise LookupError(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filter_text: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> int:
    """Print the exercises that match the options and return how many are done."""
    if not paths and not names:
        print(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}")
    filters = [f for f in (filter_text or "").lower().split(",") if f.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        done = exercise.looks_done()
        if done:
            done_count += 1
        status = "Done" if done else "Pending"
        matches = filter_text is None or any(
            f in exercise.name or f in fname for f in filters
        )
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if wanted and matches:
            if paths:
                line = fname
            elif names:
                line = exercise.name
            else:
                line = f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
            sys.stdout.write(line + "\n")
    total = len(exercises)
    percentage = f"{done_count / total * 100.0:.1f}" if total else "NaN"
    print(f"Progress: You completed {done_count} / {total} exercises ({percentage} %).")
    return done_count


class WatchShell:
    """Interprets the commands typed while watch mode is running."""

    def __init__(self, hint: str | None = None) -> None:
        self.hint = hint
        self.should_quit = threading.Event()

    def handle(self, line: str) -> None:
        """Carry out one command line."""
        command = line.strip()
        if command == "hint":
            if self.hint is not None:
                print(self.hint)
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        elif command == "quit":
            self.should_quit.set()
            print("Bye!")
        elif command == "help":
            print(WATCH_HELP)
        elif command.startswith("!"):
            shell_command = command[1:]
            parts = shell_command.split()
            if not parts:
                print("no command provided")
                return
            try:
                subprocess.run(parts, check=False)
            except OSError as exc:
                print(f"failed to execute command `{shell_command}`: {exc}")
        else:
            print(f"unknown command: {command}")

    def _serve(self) -> None:
        while not self.should_quit.is_set():
            try:
                line = sys.stdin.readline()
            except (OSError, ValueError) as exc:
                print(f"error reading command: {exc}")
                return
            if not line:
                return
            self.handle(line)

    def _start(self) -> None:
        print(
            "Welcome to watch mode! You can type 'help' to get an overview "
            "of the commands you can use here."
        )
        threading.Thread(target=self._serve, daemon=True).start()


class _ChangeCollector(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue[Path]) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))


def _clear_screen() -> None:
    print("\x1bc")


def _ends_with(path: Path, tail: Path) -> bool:
    parts = tail.parts
    return 0 < len(parts) <= len(path.parts) and path.parts[-len(parts):] == parts


def _next_changes(changes: queue.Queue[Path]) -> list[Path]:
    """Wait up to a second for a change, then gather any that follow closely."""
    try:
        first = changes.get(timeout=1.0)
    except queue.Empty:
        return []
    seen = {first: None}
    while True:
        try:
            seen.setdefault(changes.get(timeout=0.2), None)
        except queue.Empty:
            return list(seen)


def watch(
    exercises: Sequence[Exercise], verbose: bool = False, success_hints: bool = False
) -> WatchStatus:
    """Verify the exercises and re-verify whenever a file under ./exercises changes."""
    changes: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeCollector(changes), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose, success_hints)
        except VerificationFailed as failure:
            shell = WatchShell(failure.exercise.hint)
        else:
            return WatchStatus.FINISHED
        shell._start()
        while not shell.should_quit.is_set():
            for changed in _next_changes(changes):
                if changed.suffix != ".rs" or not changed.exists():
                    continue
                filepath = changed.resolve()
                current = [next((e for e in exercises if _ends_with(filepath, e.path)), None)]
                pending = [e for e in current if e is not None] + [
                    e
                    for e in exercises
                    if not e.looks_done() and not _ends_with(filepath, e.path)
                ]
                num_done = sum(1 for e in exercises if e.looks_done())
                _clear_screen()
                try:
                    verify(pending, (num_done, len(exercises)), verbose, success_hints)
                except VerificationFailed as failure:
                    shell.hint = failure.exercise.hint
                else:
                    return WatchStatus.FINISHED
        return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?")
        return 1
    project.exercises_to_json()
    if not project.crates:
        print("Failed find any exercises, make sure you're in the exercises directory")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print("rust-analyzer will now parse exercises, restart your language server or editor")
    return 0


def _watch(exercises: Sequence[Exercise], verbose: bool, success_hints: bool) -> int:
    try:
        status = watch(exercises, verbose, success_hints)
    except OSError as exc:
        print(f"Error: Could not watch your progress. Error message was {exc!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if no_emoji() else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            f"you can simply run `{PROGRAM} watch` again"
        )
    return 0


def _dispatch(args: argparse.Namespace, exercises: list[Exercise], verbose: bool) -> int:
    match args.command:
        case "list":
            try:
                list_exercises(
                    exercises, args.paths, args.names, args.filter, args.unsolved, args.solved
                )
            except BrokenPipeError:
                return 0
            except OSError:
                return 1
            return 0
        case "run" | "reset" | "hint":
            try:
                exercise = find_exercise(args.name, exercises)
            except LookupError as exc:
                print(exc)
                return 1
            if args.command == "hint":
                print(exercise.hint)
                return 0
            if args.command == "reset":
                try:
                    reset(exercise)
                except OSError:
                    return 1
                return 0
            try:
                run(exercise, verbose)
            except VerificationFailed:
                return 1
            return 0
        case "verify":
            try:
                verify(exercises, (0, len(exercises)), verbose, False)
            except VerificationFailed:
                return 1
            return 0
        case "lsp":
            return _lsp()
        case "watch":
            return _watch(exercises, verbose, args.success_hints)
    raise ValueError(f"unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command line; returns the exit status."""
    args = build_parser().parse_args(argv)
    if args.command is None:
        print(f"\n{WELCOME}\n")
    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the exercises directory")
        print("Try `cd` into the directory that holds info.toml!")
        return 1
    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1
    exercises = load_exercises("info.toml")
    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0
    return _dispatch(args, exercises, args.nocapture)


if __name__ == "__main__":
    sys.exit(main())