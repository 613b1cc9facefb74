"""
Import boundary guard for src/findash/ui/ and src/findash/services/.

Rules:
  - UI files talk to the backend through the API client only: they must never
    import sqlmodel, sqlalchemy, the ORM tables, the infra layer or services.
  - Service files must not import fastapi.
"""

import ast
from collections.abc import Callable
from pathlib import Path

REPO_ROOT = Path(__file__).parent.parent
UI_ROOT = REPO_ROOT / "src" / "findash" / "ui"
SERVICES_ROOT = REPO_ROOT / "src" / "findash" / "services"

BANNED_MODULES = {
    "sqlmodel",
    "sqlalchemy",
}
BANNED_PREFIXES = (
    "findash.models",
    "findash.db",
    "findash.infra",
    "findash.services",
    "findash.api.routers",
    "findash.api.app",
)


def _is_banned_import(module_name: str) -> bool:
    """Return True if the module name is in the banned set or starts with a banned prefix."""
    if module_name.split(".")[0] in BANNED_MODULES:
        return True
    return any(module_name.startswith(prefix) for prefix in BANNED_PREFIXES)


def _file_imports_any(path: Path, is_banned: Callable[[str], bool]) -> bool:
    """Parse *path* with AST and return True if any import matches *is_banned*."""
    source = path.read_text(encoding="utf-8")
    try:
        tree = ast.parse(source, filename=str(path))
    except SyntaxError:
        return True

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if is_banned(alias.name):
                    return True
        elif isinstance(node, ast.ImportFrom):
            if is_banned(node.module or ""):
                return True

    return False


def _repo_relative(path: Path) -> str:
    return path.relative_to(REPO_ROOT).as_posix()


def test_ui_import_boundaries() -> None:
    violations = [
        _repo_relative(py_file)
        for py_file in sorted(UI_ROOT.rglob("*.py"))
        if _file_imports_any(py_file, _is_banned_import)
    ]
    assert not violations, (
        "UI files must use the API client instead of ORM/service imports:\n"
        + "\n".join(f"  {v}" for v in violations)
    )


def test_service_import_boundaries() -> None:
    """Service files must not import from fastapi."""
    _is_fastapi = lambda m: m.startswith("fastapi")  # noqa: E731
    violations = [
        _repo_relative(py_file)
        for py_file in sorted(SERVICES_ROOT.rglob("*.py"))
        if _file_imports_any(py_file, _is_fastapi)
    ]
    assert not violations, (
        "Service files must not import fastapi:\n"
        + "\n".join(f"  {v}" for v in violations)
    )
