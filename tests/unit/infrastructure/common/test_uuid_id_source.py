"""Tests for UuidIdSource."""

import re

from flashdeck.infrastructure.common.id_source import UuidIdSource

UUID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


class TestUuidIdSource:
    def test_new_id_is_uuid4_text(self) -> None:
        new_id = UuidIdSource().new_id()

        assert len(new_id) == 36
        assert UUID_PATTERN.match(new_id)

    def test_new_ids_are_distinct(self) -> None:
        source = UuidIdSource()

        assert len({source.new_id() for _ in range(100)}) == 100
