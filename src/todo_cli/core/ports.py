# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the storage layer.

The codec and persistence layer depend on the Document protocol instead of
concrete types, so the task store and the user config travel through the
same encode/decode/load/save code.
"""

from typing import Any, ClassVar, Protocol, Self

DocumentData = dict[str, Any]
# Plain data tree: dicts, lists, str, int, bool and None only.


class Document(Protocol):
    """A typed value that can be written to and read from any Format."""

    # Root element name used by the XML codec.
    document_name: ClassVar[str]

    def to_data(self) -> DocumentData: ...

    @classmethod
    def from_data(cls, data: DocumentData) -> Self: ...

    @classmethod
    def empty(cls) -> Self: ...
