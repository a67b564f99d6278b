"""Generation of the rust-project.json file for rust-analyzer."""

from __future__ import annotations

import glob
import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


class RustAnalyzerProject:
    """Collects the data written to rust-project.json."""

    def __init__(self) -> None:
        self.sysroot_src = ""
        self.crates: list[Crate] = []

    def to_dict(self) -> dict:
        return {"sysroot_src": self.sysroot_src, "crates": [asdict(c) for c in self.crates]}

    def write_to_disk(self, path="./rust-project.json") -> None:
        """Write the project file as compact JSON."""
        Path(path).write_bytes(json.dumps(self.to_dict(), separators=(",", ":")).encode("utf-8"))

    def add_path(self, path) -> None:
        """Add a crate for the path if it has a .rs extension."""
        if Path(path).suffix == ".rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self, root="./exercises") -> None:
        """Add a crate for every .rs file under root."""
        for path in sorted(glob.glob(os.path.join(str(root), "**", "*"), recursive=True)):
            self.add_path(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return
        result = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True, check=False)
        text = (result.stdout or b"").decode("utf-8", errors="replace")
        words = text.split()
        toolchain = words[0] if words else text
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = os.path.join(toolchain, "lib", "rustlib", "src", "rust", "library")