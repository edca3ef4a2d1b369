import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "radixterm")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
START_BASE_DEFAULT = "dec"
BLINK_DEFAULT = True
BLINK_INTERVAL_MS_DEFAULT = 530
SHOW_STATUS_DEFAULT = True


def load_config():
    cfg = {
        "START_BASE": START_BASE_DEFAULT,
        "BLINK": BLINK_DEFAULT,
        "BLINK_INTERVAL_MS": BLINK_INTERVAL_MS_DEFAULT,
        "SHOW_STATUS": SHOW_STATUS_DEFAULT,
    }

    if os.path.exists(CONFIG_JSON):
        try:
            import json

            with open(CONFIG_JSON, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                start = data.get("start_base")
                if isinstance(start, str) and start.strip().lower() in ("bin", "oct", "dec", "hex"):
                    cfg["START_BASE"] = start.strip().lower()

                blink = data.get("blink")
                if isinstance(blink, bool):
                    cfg["BLINK"] = blink

                interval = data.get("blink_interval_ms")
                # bool is an int subclass
                if isinstance(interval, (int, float)) and not isinstance(interval, bool) and interval > 0:
                    cfg["BLINK_INTERVAL_MS"] = interval

                show_status = data.get("show_status")
                if isinstance(show_status, bool):
                    cfg["SHOW_STATUS"] = show_status
        except Exception:
            pass

    return cfg
