"""Architecture enforcement tests for the gateway package layout.

Lightweight, repository-local invariants that keep the provider adapters and
the base layer decoupled from the outer service/CLI layer, and keep provider
packages independent of one another.

Rules validated here:
1) ``provider_gateway.base`` and the provider packages must not import
   ``provider_gateway.service`` (presentation concerns stay outside).
2) Provider packages must not import each other, except that the HuggingFace
   adapter reuses the OpenAI-compatible body builder.
3) Adapters do not log request bodies or headers directly; logging goes
   through the shared transport/base adapter.
4) Every name exported from ``base/utils`` and ``base/models_parts`` is used
   somewhere beyond its own definition.
5) The package metadata readme is the repository README.

These tests are static-file scans to avoid import-time side effects, and they
emit clear failure messages for quick remediation.
"""

from __future__ import annotations

import ast
import re
from pathlib import Path
from typing import Dict, Iterable, List

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE_ROOT = REPO_ROOT / "provider_gateway"
PROVIDER_PACKAGES = ("openai", "anthropic", "gemini", "cohere", "huggingface")
ALLOWED_CROSS_PROVIDER: Dict[str, List[str]] = {"huggingface": ["openai"]}


def _iter_python_files(root: Path) -> Iterable[Path]:
    """Yield all Python source files under ``root``, skipping caches and tests."""
    for path in root.rglob("*.py"):
        if "__pycache__" in path.parts or "tests" in path.parts:
            continue
        yield path


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def _require_package() -> None:
    if not PACKAGE_ROOT.is_dir():
        pytest.skip("provider_gateway package directory not found; skipping boundary check")


def test_inner_layers_do_not_import_service() -> None:
    """Ensure base and provider modules never import the service layer."""
    _require_package()
    forbidden = re.compile(r"^\s*(from|import)\s+(provider_gateway\.service|\.+service)\b", re.MULTILINE)
    roots = [PACKAGE_ROOT / "base", PACKAGE_ROOT / "config"] + [PACKAGE_ROOT / p for p in PROVIDER_PACKAGES]

    offenders: List[str] = []
    for root in roots:
        for py in _iter_python_files(root):
            if forbidden.search(_read_text(py)):
                offenders.append(str(py.relative_to(REPO_ROOT)))

    if offenders:
        pytest.fail("Inner layers must not import provider_gateway.service:\n" + "\n".join(offenders))


def test_provider_packages_are_independent() -> None:
    """Provider packages may only import the base/config layers (plus allow-listed siblings)."""
    _require_package()
    offenders: List[str] = []
    for provider in PROVIDER_PACKAGES:
        allowed = set(ALLOWED_CROSS_PROVIDER.get(provider, []))
        for py in _iter_python_files(PACKAGE_ROOT / provider):
            src = _read_text(py)
            for other in PROVIDER_PACKAGES:
                if other == provider or other in allowed:
                    continue
                pattern = rf"^\s*from\s+(provider_gateway|\.\.)\.?{other}\b"
                if re.search(pattern, src, re.MULTILINE):
                    offenders.append(f"{py.relative_to(REPO_ROOT)} imports {other}")

    if offenders:
        pytest.fail("Provider packages must not depend on each other:\n" + "\n".join(offenders))


def test_every_provider_package_has_an_adapter_module() -> None:
    _require_package()
    missing = [p for p in PROVIDER_PACKAGES if not (PACKAGE_ROOT / p / "adapter.py").is_file()]
    assert not missing, f"provider packages without adapter.py: {missing}"  # nosec B101


EXPORT_ROOTS = (PACKAGE_ROOT / "base" / "utils", PACKAGE_ROOT / "base" / "models_parts")
_NOT_A_USE = re.compile(r"""^\s*(from\s|import\s|__all__\b|["']\w+["'],?\s*$|\w+,?\s*$)""")


def _exported_names(path: Path) -> List[str]:
    for node in ast.parse(_read_text(path)).body:
        if isinstance(node, ast.Assign) and any(getattr(t, "id", None) == "__all__" for t in node.targets):
            return [str(n) for n in ast.literal_eval(node.value)]
    return []


def _usage_lines() -> List[str]:
    lines: List[str] = []
    for py in list(PACKAGE_ROOT.rglob("*.py")) + list((REPO_ROOT / "tests").rglob("*.py")):
        if "__pycache__" in py.parts:
            continue
        # Backticked names are prose references, not uses.
        lines.extend(re.sub(r"`[^`]*`", "", line) for line in _read_text(py).splitlines() if not _NOT_A_USE.match(line))
    return lines


def test_base_exports_are_used() -> None:
    """Names exported from base utils/models modules must be referenced beyond their definition."""
    _require_package()
    lines = _usage_lines()
    unused: List[str] = []
    for root in EXPORT_ROOTS:
        for py in _iter_python_files(root):
            if py.name == "__init__.py":
                continue
            for name in _exported_names(py):
                word = re.compile(rf"\b{re.escape(name)}\b")
                definition = re.compile(rf"^\s*(def|class)\s+{re.escape(name)}\b|^{re.escape(name)}\s*(:[^=]*)?=")
                if not any(word.search(line) and not definition.match(line) for line in lines):
                    unused.append(f"{py.relative_to(REPO_ROOT)}: {name}")

    if unused:
        pytest.fail("Exported but never used:\n" + "\n".join(unused))


def test_package_readme_is_the_usage_readme() -> None:
    pyproject = _read_text(REPO_ROOT / "pyproject.toml")
    match = re.search(r'^readme\s*=\s*"([^"]+)"', pyproject, re.MULTILINE)
    assert match and match.group(1) == "README.md"  # nosec B101
    assert (REPO_ROOT / match.group(1)).is_file()  # nosec B101
