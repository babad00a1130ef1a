from __future__ import annotations

import runpy
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "apps" / "terminal"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "games"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

import playground_app.__main__ as terminal_main


def test_main_defaults_to_menu(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(terminal_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = terminal_main.main([])
    assert rc == 0
    assert calls == [["menu"]]


def test_main_passes_through_args(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(terminal_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = terminal_main.main(["render", "&eHi", "--out", "hi"])
    assert rc == 0
    assert calls == [["render", "&eHi", "--out", "hi"]]


def test_main_module_runpath_without_package_context() -> None:
    main_path = ROOT / "apps" / "terminal" / "playground_app" / "__main__.py"
    result = runpy.run_path(str(main_path))
    assert "main" in result
