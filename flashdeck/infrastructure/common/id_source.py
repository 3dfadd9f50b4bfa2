"""UUID-backed identifier source."""

from uuid import uuid4


class UuidIdSource:
    """Issues random UUIDv4 identifiers in their 36-character text form."""

    def new_id(self) -> str:
        return str(uuid4())
