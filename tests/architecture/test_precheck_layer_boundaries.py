"""
Summary: Architecture checks keeping precheck use cases and domain free of outer layers.
Why: Prevent regressions where comparison logic reaches into adapters or the CLI.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
PRECHECK_DIR = REPO_ROOT / "src" / "precopy" / "features" / "precheck"


@pytest.mark.parametrize(
    ("layer", "forbidden"),
    [
        ("usecases", ("adapters", "precopy.ui", "precopy.application")),
        ("domain", ("adapters", "usecases", "precopy.ui", "precopy.application", "precopy.platform")),
    ],
)
def test_layer_does_not_import_outer_layers(layer: str, forbidden: tuple[str, ...]) -> None:
    """Inner layers must only depend on ports and shared platform helpers."""

    offending: list[str] = []
    for path in (PRECHECK_DIR / layer).rglob("*.py"):
        for line in path.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if not stripped.startswith(("import ", "from ")):
                continue
            if any(name in stripped for name in forbidden):
                offending.append(f"{path.relative_to(REPO_ROOT)}: {stripped}")
    assert offending == [], "Forbidden imports found:\n" + "\n".join(offending)
