"""Architecture fitness checks for the pure scanning core."""

from __future__ import annotations

import ast
from pathlib import Path

FORBIDDEN_MODULE_PREFIXES = (
    "click",
    "rich",
    "pydantic",
    "sqlglot",
    "sqlmerge.cli",
    "sqlmerge.application",
    "sqlmerge.formatters",
    "sqlmerge.config",
    "sqlmerge.payloads",
    "sqlmerge.models",
    "sqlmerge.domain",
)


def _iter_target_files(root: Path) -> list[Path]:
    """Return core Python modules to enforce import rules."""
    core_dir = root / "src" / "sqlmerge" / "core"
    return sorted(core_dir.rglob("*.py"))


def _forbidden_imports(path: Path) -> list[str]:
    """Collect forbidden import lines in one module."""
    source = path.read_text(encoding="utf-8")
    tree = ast.parse(source)
    hits: list[str] = []

    for node in ast.walk(tree):
        violation = _import_violation(node)
        if violation:
            hits.append(violation)
    return hits


def _import_violation(node: ast.AST) -> str | None:
    """Return import violation string for AST node, or None."""
    if isinstance(node, ast.Import):
        for alias in node.names:
            if alias.name.startswith(FORBIDDEN_MODULE_PREFIXES):
                return f"import {alias.name}"
    if isinstance(node, ast.ImportFrom):
        module_name = node.module or ""
        if node.level > 1:
            return f"from {'.' * node.level}{module_name} import ..."
        if module_name.startswith(FORBIDDEN_MODULE_PREFIXES):
            return f"from {module_name} import ..."
    return None


def test_core_has_no_outer_layer_imports() -> None:
    root = Path(__file__).resolve().parents[2]
    files = _iter_target_files(root)
    assert files, "expected core modules to check"

    violations: dict[str, list[str]] = {}
    for path in files:
        hits = _forbidden_imports(path)
        if hits:
            violations[str(path.relative_to(root))] = hits

    assert violations == {}
