# SPDX-License-Identifier: MIT

EntityId = int


class IdSequence:
    """Monotonic id source. Ids handed out are never handed out again."""

    def __init__(self, next_id: int = 1) -> None:
        self._next_id = next_id

    @property
    def next_id(self) -> int:
        return self._next_id

    def generate(self) -> EntityId:
        entity_id = self._next_id
        self._next_id += 1
        return entity_id

    def advance_past(self, entity_id: EntityId) -> None:
        if entity_id >= self._next_id:
            self._next_id = entity_id + 1
