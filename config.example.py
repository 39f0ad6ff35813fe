# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.

Boolean variables accept 1/true/yes/y/on (anything else is false).
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory, also holds todo.log (default: .local/todo).",
    "TODO_TASKS_PATH": "Default file for /save and /load (default: <data_dir>/tasks.todo).",
    "TODO_EXPORT_PATH": "Default file for /export (default: <data_dir>/tasks.csv).",
    # Behaviour
    "TODO_SEED_SAMPLES": "Add three sample tasks on start-up (default: true).",
    "TODO_CONFIRM_DELETE": "Ask before /rm deletes a task (default: true).",
}
