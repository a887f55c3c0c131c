import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "pfdb")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
PREFIX_DEFAULT = "."
DELIMITER_DEFAULT = "="
HISTORY_OVERLAY_MAX_ROWS_DEFAULT = 500


def load_config():
    cfg = {
        "PREFIX": PREFIX_DEFAULT,
        "DELIMITER": DELIMITER_DEFAULT,
        "HISTORY_OVERLAY_MAX_ROWS": HISTORY_OVERLAY_MAX_ROWS_DEFAULT,
    }

    if os.path.exists(CONFIG_JSON):
        try:
            import json

            with open(CONFIG_JSON, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                prefix = data.get("prefix")
                if isinstance(prefix, str):
                    cfg["PREFIX"] = prefix

                delimiter = data.get("delimiter")
                if isinstance(delimiter, str) and delimiter:
                    cfg["DELIMITER"] = delimiter

                max_rows = data.get("history_overlay_max_rows")
                if isinstance(max_rows, int) and not isinstance(max_rows, bool):
                    if max_rows > 0:
                        cfg["HISTORY_OVERLAY_MAX_ROWS"] = max_rows
        except (OSError, ValueError):
            pass

    return cfg
