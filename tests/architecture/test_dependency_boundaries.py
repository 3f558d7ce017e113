"""依存境界（core/export/interactive）の破りを検出するテスト。"""

from __future__ import annotations

import ast
from pathlib import Path


def _repo_root() -> Path:
    path = Path(__file__).resolve()
    for parent in path.parents:
        if (parent / "src").is_dir() and (parent / "tests").is_dir():
            return parent
    raise RuntimeError("repo root が見つからない")


def _module_name_for_path(*, path: Path, src_root: Path) -> tuple[str, bool]:
    parts = list(path.relative_to(src_root).parts)
    is_package = parts[-1] == "__init__.py"
    if is_package:
        parts = parts[:-1]
    else:
        parts[-1] = parts[-1].removesuffix(".py")
    return ".".join(parts), is_package


def _resolve_importfrom(*, current_module: str, is_package: bool, node: ast.ImportFrom) -> set[str]:
    level = int(node.level or 0)
    if level == 0:
        base = str(node.module or "")
    else:
        package = current_module if is_package else current_module.rsplit(".", 1)[0]
        parts = package.split(".")
        up = level - 1
        if up >= len(parts):
            raise ValueError(f"相対 import の解決に失敗: module={current_module!r}, level={level}")
        base = ".".join(parts[: len(parts) - up])
        if node.module is not None:
            base = f"{base}.{node.module}"
    if not base:
        return set()
    return {base} | {f"{base}.{a.name}" for a in node.names if a.name != "*"}


def _imports_in_file(*, path: Path, src_root: Path) -> set[str]:
    current_module, is_package = _module_name_for_path(path=path, src_root=src_root)
    modules: set[str] = set()
    for node in ast.walk(ast.parse(path.read_text(encoding="utf-8"))):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            modules.update(
                _resolve_importfrom(current_module=current_module, is_package=is_package, node=node)
            )
    return modules


def _assert_no_forbidden_imports(*, root: Path, forbidden_prefixes: tuple[str, ...]) -> None:
    repo_root = _repo_root()
    src_root = repo_root / "src"
    files = sorted(root.rglob("*.py"))
    assert files, f"対象ファイルが無い: {root}"

    violations: list[str] = []
    for path in files:
        modules = _imports_in_file(path=path, src_root=src_root)
        bad = sorted(m for m in modules if m.startswith(forbidden_prefixes))
        if bad:
            violations.append(f"{path.relative_to(repo_root)}: {', '.join(bad)}")

    if violations:
        joined = "\n".join(violations)
        raise AssertionError(f"依存境界違反の import を検出:\n{joined}")


def test_core_does_not_depend_on_outer_layers() -> None:
    root = _repo_root()
    _assert_no_forbidden_imports(
        root=root / "src" / "landscape" / "core",
        forbidden_prefixes=(
            "landscape.export",
            "landscape.interactive",
            "landscape.scenes",
            "landscape.api",
            "pyglet",
            "moderngl",
        ),
    )


def test_export_does_not_depend_on_interactive() -> None:
    root = _repo_root()
    _assert_no_forbidden_imports(
        root=root / "src" / "landscape" / "export",
        forbidden_prefixes=("landscape.interactive", "landscape.api", "pyglet", "moderngl"),
    )


def test_scenes_only_use_the_frame_context() -> None:
    root = _repo_root()
    _assert_no_forbidden_imports(
        root=root / "src" / "landscape" / "scenes",
        forbidden_prefixes=("landscape.interactive", "landscape.export", "pyglet", "moderngl"),
    )


def test__resolve_importfrom_handles_relative_imports() -> None:
    node = ast.parse("from ..export import svg\n").body[0]
    assert isinstance(node, ast.ImportFrom)
    got = _resolve_importfrom(current_module="landscape.core.scene", is_package=False, node=node)
    assert {"landscape.export", "landscape.export.svg"} <= got

    node = ast.parse("from . import transform\n").body[0]
    assert isinstance(node, ast.ImportFrom)
    got = _resolve_importfrom(current_module="landscape.core.scene", is_package=False, node=node)
    assert "landscape.core.transform" in got
