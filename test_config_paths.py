import json
import tempfile
from pathlib import Path

import config_paths


def _load_with(cfg_path: Path):
    orig_dir = config_paths.CONFIG_DIR
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_DIR = str(cfg_path.parent)
        config_paths.CONFIG_JSON = str(cfg_path)
        return config_paths.load_config()
    finally:
        config_paths.CONFIG_DIR = orig_dir
        config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "radixterm" / "config.json"
        cfg = _load_with(cfg_path)
        assert cfg == {
            "START_BASE": "dec",
            "BLINK": True,
            "BLINK_INTERVAL_MS": 530,
            "SHOW_STATUS": True,
        }
        # loading never creates anything
        assert not cfg_path.parent.exists()


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "radixterm"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        cfg_path.write_text(
            json.dumps(
                {
                    "start_base": "HEX",
                    "blink": False,
                    "blink_interval_ms": 250,
                    "show_status": False,
                }
            )
        )
        cfg = _load_with(cfg_path)
        assert cfg["START_BASE"] == "hex"
        assert cfg["BLINK"] is False
        assert cfg["BLINK_INTERVAL_MS"] == 250
        assert cfg["SHOW_STATUS"] is False


def test_load_config_ignores_invalid_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "radixterm"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        cfg_path.write_text(
            json.dumps(
                {
                    "start_base": "base36",
                    "blink": "yes",
                    "blink_interval_ms": True,
                    "show_status": 0,
                }
            )
        )
        cfg = _load_with(cfg_path)
        assert cfg["START_BASE"] == "dec"
        assert cfg["BLINK"] is True
        assert cfg["BLINK_INTERVAL_MS"] == 530
        assert cfg["SHOW_STATUS"] is True


def test_load_config_survives_malformed_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_dir = Path(tmp) / "radixterm"
        cfg_dir.mkdir(parents=True, exist_ok=True)
        cfg_path = cfg_dir / "config.json"
        cfg_path.write_text("{not json")
        cfg = _load_with(cfg_path)
        assert cfg["START_BASE"] == "dec"
        assert cfg["BLINK_INTERVAL_MS"] == 530
