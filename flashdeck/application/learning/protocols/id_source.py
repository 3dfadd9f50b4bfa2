"""Protocol for issuing new entity identifiers."""

from typing import Protocol


class IdSourceProtocol(Protocol):
    """Source of fresh, opaque, non-empty identifiers."""

    def new_id(self) -> str:
        """
        Issue a new identifier.

        Returns:
            A printable string that has never been issued before
            (with overwhelming probability)
        """
        ...
