"""File helpers: graph directories, program files and Graphviz rendering."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

GRAPHS_DIR = "graphs"
EMULATE_DIR = "emulate"

_SEPARATORS = tuple(sep for sep in {"/", os.sep, os.altsep} if sep)


class RenderError(RuntimeError):
    """Raised when Graphviz cannot turn a DOT file into an image."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


def _remove_all(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


def reset_graphs_dir(root: str | os.PathLike = ".") -> Path:
    """Delete the graphs directory under root and create it again with emulate/."""
    graphs = Path(root) / GRAPHS_DIR
    _remove_all(graphs)
    (graphs / EMULATE_DIR).mkdir(parents=True, exist_ok=True)
    return graphs


def recreate_emulate_dir(root: str | os.PathLike = ".") -> Path:
    """Empty the emulation step directory under root, creating it if needed."""
    emulate = Path(root) / GRAPHS_DIR / EMULATE_DIR
    _remove_all(emulate)
    emulate.mkdir(parents=True, exist_ok=True)
    return emulate


def read_program_file(filename: str | os.PathLike) -> str:
    """Read a text file as lines joined by newlines, without a trailing newline."""
    with open(filename, encoding="utf-8", newline="") as handle:
        content = handle.read()
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return "\n".join(line.removesuffix("\r") for line in lines)


def render_dot(dot: str, dot_path: str | os.PathLike, png_path: str | os.PathLike) -> None:
    """Write DOT text to dot_path and render it to png_path with Graphviz."""
    Path(dot_path).write_text(dot, encoding="utf-8")
    command = ["dot", "-Tpng", "-o", os.fspath(png_path), os.fspath(dot_path)]
    try:
        completed = subprocess.run(
            command, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, check=False
        )
    except OSError as exc:
        raise RenderError(str(exc)) from exc
    if completed.returncode != 0:
        output = (completed.stdout or b"").decode("utf-8", errors="replace")
        raise RenderError(f"exit status {completed.returncode}", output)


def _extension(filename: str) -> str:
    base_start = max(filename.rfind(sep) for sep in _SEPARATORS) + 1
    dot = filename.rfind(".", base_start)
    return "" if dot < 0 else filename[dot:]


def add_suffix_to_filename(filename: str, suffix: str) -> str:
    """Insert suffix between a file name and its extension."""
    ext = _extension(filename)
    return filename[: len(filename) - len(ext)] + suffix + ext


def write_text(data: str, filename: str | os.PathLike) -> None:
    """Write a string to a file, replacing its contents."""
    Path(filename).write_text(data, encoding="utf-8")