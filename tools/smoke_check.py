#!/usr/bin/env python3
"""Lightweight local sanity checks for Decision Theory Lab."""

from __future__ import annotations

import compileall
import importlib
import platform
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = ROOT / "src"
APP_PATH = ROOT / "app"

for path in (ROOT, SRC_PATH, APP_PATH):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

MODULES = [
    "numpy",
    "pandas",
    "streamlit",
    "dtl.config",
    "dtl.matrix",
    "dtl.engines.selection",
    "dtl.engines.uncertainty",
    "dtl.engines.risk",
    "dtl.report",
    "dtl.logging_helpers",
    "ui_guards",
]


def _module_version(name: str) -> str:
    root_name = name.split(".")[0]
    module = importlib.import_module(root_name)
    return getattr(module, "__version__", "unknown")


def main() -> int:
    print(f"Python: {platform.python_version()}")
    for module_name in MODULES:
        importlib.import_module(module_name)
    for name in ("numpy", "pandas", "streamlit", "dtl"):
        print(f"{name}: {_module_version(name)}")

    from dtl import Orientation, compute_uncertainty

    result = compute_uncertainty([[4, 2, 5], [3, 6, 1]], None, 0.5, Orientation.GAIN)
    if result.best_indices() != {"maximax": 1, "wald": 0, "hurwicz": 0, "laplace": 0}:
        print(f"unexpected best indices: {result.best_indices()}")
        return 1

    ok = compileall.compile_dir(str(ROOT / "src"), quiet=1) and compileall.compile_dir(str(APP_PATH), quiet=1)
    if not ok:
        print("compileall failed")
        return 1

    print("smoke check passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
