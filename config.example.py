# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # Storage
    "DORU_PATH": "Todo file (default: <data_dir>/todos.json, or todos.sqlite3 for sqlite).",
    "DORU_DATA_DIR": "Data directory (default: ~/.doru).",
    "DORU_STORAGE": "Storage backend: json or sqlite (default: json).",
    # Logging
    "DORU_LOG_LEVEL": "Console logging level (default: WARNING).",
    "DORU_LOG_DIR": "Directory for doru.log (default: <data_dir>).",
    "DORU_LOG_FILE": "Write doru.log at all (true/false, default: true).",
}
