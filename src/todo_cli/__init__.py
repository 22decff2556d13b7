"""todo-cli: a local task tracker with multi-format storage."""

__version__ = "0.3.0"
