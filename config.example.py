# config.example.py

"""
Documentation-only module (safe to commit).

Tool settings are loaded from environment variables (optionally via a local .env file).
They only tune logging and colour. Where tasks are stored is set with
`todo config data-path`, which writes the user config file.

This file exists to make the repo self-documenting without a .env at hand.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "Program name shown in help/usage (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level on stderr (default: WARNING).",
    "TODO_LOG_FILE": "Optional file receiving DEBUG logs (default: unset).",
    # Terminal
    "TODO_COLOR": "Coloured labels and symbols when attached to a TTY (default: true).",
    "FORCE_COLOR": "Colour even when not attached to a TTY.",
    "NO_COLOR": "Disable colour completely (any value).",
}
