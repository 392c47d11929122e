"""
Summary: Check that the comparison modules open with a Summary/Why header docstring.
Why: Keep header formats consistent across the precheck core and its tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT: Path = Path(__file__).resolve().parents[1]
SUMMARY_PREFIX: str = "Summary: "
WHY_PREFIX: str = "Why: "

TARGET_MODULES: tuple[Path, ...] = (
    Path("src/precopy/features/precheck/usecases/file_comparator.py"),
    Path("src/precopy/features/precheck/usecases/tree_comparator.py"),
    Path("tests/features/precheck/usecases/test_file_comparator.py"),
    Path("tests/features/precheck/usecases/test_tree_comparator.py"),
    Path("tests/architecture/test_precheck_layer_boundaries.py"),
)


@pytest.mark.parametrize("module_path", TARGET_MODULES, ids=lambda path: str(path))
def test_module_header_has_summary_and_why(module_path: Path) -> None:
    """The first four non-blank lines form a Summary/Why docstring."""

    lines = [line for line in (REPO_ROOT / module_path).read_text(encoding="utf-8").splitlines() if line.strip()]
    assert len(lines) >= 4, f"{module_path} is too short to carry a header"

    opening, summary, why, closing = (line.strip() for line in lines[:4])

    assert opening == '"""', f"{module_path} must start with a header docstring"
    assert summary.startswith(SUMMARY_PREFIX) and summary.removeprefix(SUMMARY_PREFIX).strip()
    assert why.startswith(WHY_PREFIX) and why.removeprefix(WHY_PREFIX).strip()
    assert closing == '"""', f"{module_path} header must close with triple quotes"
