import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "games"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from playground_core.config import AppConfig, config_path, load_config, save_config
from playground_games.wordle import DEFAULT_WORD_API
from playground_renderer import BACKGROUND_NAMES, STYLE_KEYS


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.renderer.point_size, 16.0)
            self.assertEqual(cfg.renderer.line_spacing, 1.15)
            self.assertEqual(cfg.wordle.word_length, 5)
            self.assertFalse(cfg.guesser.show_progress)

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.renderer.font_paths["bold"] = "/fonts/Bold.otf"
            cfg.wordle.word_length = 6
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.renderer.font_paths["bold"], "/fonts/Bold.otf")
            self.assertIsNone(reloaded.renderer.font_paths["regular"])
            self.assertEqual(reloaded.wordle.word_length, 6)

    def test_migrate_v1_single_font(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            old = {"renderer": {"font_path": "/fonts/Regular.otf", "point_size": 20}}
            path.write_text(json.dumps(old), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.config_version, 2)
            self.assertEqual(cfg.renderer.font_paths["regular"], "/fonts/Regular.otf")
            self.assertIsNone(cfg.renderer.font_paths["bold"])
            self.assertEqual(cfg.renderer.point_size, 20.0)

    def test_normalizes_out_of_range_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": 2,
                "renderer": {"background": "plaid", "width": 1, "unknown": True},
                "typing": {"poll_ms": 1},
                "wordle": {"word_length": 99},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.renderer.background, "slate")
            self.assertEqual(cfg.renderer.width, 16)
            self.assertEqual(cfg.typing.poll_ms, 50)
            self.assertEqual(cfg.wordle.word_length, 15)
            self.assertFalse(hasattr(cfg.renderer, "unknown"))

    def test_wrong_typed_values_fall_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": "two",
                "renderer": {"width": "wide", "point_size": [12], "font_paths": "x.ttf", "output_dir": 3},
                "wordle": {"word_length": None, "timeout_s": "soon"},
                "typing": {"poll_ms": {}, "phrases_path": 7},
                "guesser": "yes",
                "diagnostics": {"keep_log_files": "many"},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.renderer.width, 640)
            self.assertEqual(cfg.renderer.point_size, 16.0)
            self.assertEqual(cfg.renderer.font_paths, {k: None for k in STYLE_KEYS})
            self.assertEqual(cfg.renderer.output_dir, "output")
            self.assertEqual(cfg.wordle.word_length, 5)
            self.assertEqual(cfg.wordle.timeout_s, 10.0)
            self.assertEqual(cfg.typing.poll_ms, 500)
            self.assertIsNone(cfg.typing.phrases_path)
            self.assertFalse(cfg.guesser.show_progress)
            self.assertEqual(cfg.diagnostics.keep_log_files, 7)

    def test_every_renderer_background_is_accepted(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            for name in BACKGROUND_NAMES:
                path.write_text(json.dumps({"renderer": {"background": name}}), encoding="utf-8")
                self.assertEqual(load_config(path).renderer.background, name)

    def test_default_word_api_matches_fetcher(self):
        self.assertEqual(AppConfig().wordle.api_url, DEFAULT_WORD_API)

    def test_corrupt_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

    def test_env_override(self):
        with patch.dict("os.environ", {"PLAYGROUND_CONFIG": "/tmp/pg/custom.json"}):
            self.assertEqual(config_path(), Path("/tmp/pg/custom.json"))


if __name__ == "__main__":
    unittest.main()
