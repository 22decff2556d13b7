"""
Storage subsystem.

Components:
- formats.py: serialization codec (TOML/JSON/YAML/XML <-> Document)
- files.py: raw file access with create-on-missing
- persistence.py: codec + files, load/save of typed documents
"""
