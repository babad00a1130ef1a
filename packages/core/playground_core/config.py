"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from playground_games.wordle import DEFAULT_WORD_API
from playground_renderer.fonts import STYLE_KEYS
from playground_renderer.pixels import BACKGROUND_NAMES

CONFIG_VERSION = 2


@dataclass
class RendererConfig:
    font_paths: dict[str, str | None] = field(default_factory=lambda: {k: None for k in STYLE_KEYS})
    point_size: float = 16.0
    left_margin: float = 10.0
    baseline: float = 50.0
    line_spacing: float = 1.15
    background_image: str | None = None
    background: str = "slate"
    width: int = 640
    height: int = 180
    output_dir: str = "output"


@dataclass
class WordleConfig:
    word_length: int = 5
    api_url: str = DEFAULT_WORD_API
    timeout_s: float = 10.0


@dataclass
class TypingConfig:
    phrases_path: str | None = None
    poll_ms: int = 500


@dataclass
class GuesserConfig:
    show_progress: bool = False


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    renderer: RendererConfig = field(default_factory=RendererConfig)
    wordle: WordleConfig = field(default_factory=WordleConfig)
    typing: TypingConfig = field(default_factory=TypingConfig)
    guesser: GuesserConfig = field(default_factory=GuesserConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Playground"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Playground"
    return Path.home() / ".config" / "playground"


def config_path() -> Path:
    override = os.environ.get("PLAYGROUND_CONFIG")
    if override:
        return Path(override).expanduser()
    return config_root() / "config.json"


def _merge(dataclass_type, raw: Any):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _coerce(value: Any, cast, default):
    try:
        return cast(value)
    except (TypeError, ValueError):
        return default


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _normalize_renderer(cfg: AppConfig) -> None:
    r = cfg.renderer
    d = RendererConfig()
    paths = r.font_paths if isinstance(r.font_paths, dict) else {}
    r.font_paths = {k: _optional_str(paths.get(k)) for k in STYLE_KEYS}
    r.point_size = max(4.0, min(256.0, _coerce(r.point_size, float, d.point_size)))
    r.line_spacing = max(0.5, _coerce(r.line_spacing, float, d.line_spacing))
    r.left_margin = _coerce(r.left_margin, float, d.left_margin)
    r.baseline = _coerce(r.baseline, float, d.baseline)
    r.width = max(16, min(8192, _coerce(r.width, int, d.width)))
    r.height = max(16, min(8192, _coerce(r.height, int, d.height)))
    r.background_image = _optional_str(r.background_image)
    if r.background not in BACKGROUND_NAMES:
        r.background = d.background
    if not isinstance(r.output_dir, str) or not r.output_dir:
        r.output_dir = d.output_dir


def _normalize_wordle(cfg: AppConfig) -> None:
    w = cfg.wordle
    d = WordleConfig()
    w.word_length = max(2, min(15, _coerce(w.word_length, int, d.word_length)))
    w.timeout_s = max(1.0, _coerce(w.timeout_s, float, d.timeout_s))
    if not isinstance(w.api_url, str) or not w.api_url:
        w.api_url = d.api_url


def _normalize_typing(cfg: AppConfig) -> None:
    t = cfg.typing
    t.poll_ms = max(50, min(2000, _coerce(t.poll_ms, int, TypingConfig().poll_ms)))
    t.phrases_path = _optional_str(t.phrases_path)


def _normalize_misc(cfg: AppConfig) -> None:
    cfg.guesser.show_progress = cfg.guesser.show_progress is True
    keep = _coerce(cfg.diagnostics.keep_log_files, int, DiagnosticsConfig().keep_log_files)
    cfg.diagnostics.keep_log_files = max(1, keep)


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = _coerce(raw.get("config_version", 1), int, 1)
    data = dict(raw)

    if version < 2:
        # v1 kept a single font file; v2 stores one path per style.
        renderer = data.get("renderer")
        renderer = dict(renderer) if isinstance(renderer, dict) else {}
        font_path = renderer.pop("font_path", None)
        if font_path and not renderer.get("font_paths"):
            renderer["font_paths"] = {"regular": font_path}
        data["renderer"] = renderer
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=_coerce(data.get("config_version", CONFIG_VERSION), int, CONFIG_VERSION),
        renderer=_merge(RendererConfig, data.get("renderer", {})),
        wordle=_merge(WordleConfig, data.get("wordle", {})),
        typing=_merge(TypingConfig, data.get("typing", {})),
        guesser=_merge(GuesserConfig, data.get("guesser", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
    )

    _normalize_renderer(cfg)
    _normalize_wordle(cfg)
    _normalize_typing(cfg)
    _normalize_misc(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
