# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "STACKTRACK_APP_NAME": "App display name (default: stacktrack).",
    "STACKTRACK_LOG_LEVEL": "Console logging level (default: WARNING). The log file is always DEBUG.",
    # Switches
    "STACKTRACK_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    "STACKTRACK_AUTOSAVE": "Save the task stack on exit (true/false, default: true).",
    # Paths (gitignored)
    "STACKTRACK_DATA_DIR": "Local data directory, also holds stacktrack.log (default: .local/stacktrack).",
    "STACKTRACK_TASKS_PATH": "Binary task file (default: <data_dir>/tasks.dat).",
}
