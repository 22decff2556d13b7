"""
Command-line glue.

Components:
- main.py: entry point, argument parsing, error -> exit code translation
- commands.py: command registry and one handler per subcommand
- bootstrap.py: builds AppState (settings + user config) per invocation
- render.py: human-readable task listings and feedback lines
- theme.py: ANSI colour helpers
"""
