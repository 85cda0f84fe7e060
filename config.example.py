# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "SCZL_APP_NAME": "Name used in the welcome banner (default: SCZL).",
    "SCZL_LOG_LEVEL": "Console logging level (default: WARNING).",
    "SCZL_LOG_TO_FILE": "Also write full DEBUG logs to <data_dir>/sczl.log (default: true).",
    # Paths
    "SCZL_DATA_DIR": "Local data directory (default: data).",
    "SCZL_TASKS_FILE": "Task file path (default: <data_dir>/sczl.txt).",
}
