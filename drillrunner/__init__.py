"""Run, verify and track a course of small Rust exercises."""

__version__ = "0.1.0"