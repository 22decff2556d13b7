"""
Core contracts shared by every subsystem.

Components:
- errors.py: the error taxonomy and the exit code each error maps to
- ports.py: the Document protocol carried by the codec and persistence layer
- state.py: per-invocation application state built by the CLI bootstrap
"""
