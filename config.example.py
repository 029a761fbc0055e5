# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "INLIER_APP_NAME": "App display name (default: inlier).",
    "INLIER_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Connectors
    "INLIER_CONSOLE_ENABLED": "Run the interactive console menu (true/false, default: true).",
    # Tasks
    "INLIER_TASK_DEADLINE_SECONDS": "Seconds before an unsubmitted task expires (default: 60).",
    # Local data
    "INLIER_DATA_DIR": "Directory for the log file (default: .local/inlier).",
}
