"""Ledger integrity errors.

These sit outside the task lifecycle taxonomy:
- CounterOverflowError: a board counter would pass its ceiling
- EntityNotFoundError: an id does not resolve to a stored entity
- GenesisAlreadyPerformedError: a second genesis on the same ledger
"""

from __future__ import annotations

from uuid import UUID

from taskledger.domain.exceptions import TaskLedgerError


class CounterOverflowError(TaskLedgerError):
    """Raised instead of wrapping when a counter would exceed its ceiling.

    Attributes:
        counter: Name of the counter.
        ceiling: The maximum representable value.
    """

    code = "CounterOverflow"

    def __init__(self, counter: str, ceiling: int) -> None:
        self.counter = counter
        self.ceiling = ceiling
        super().__init__(f"CounterOverflow: {counter} is at its ceiling {ceiling}")


class EntityNotFoundError(TaskLedgerError):
    """Raised when an entity id is not present in the store.

    Attributes:
        kind: Entity kind (task, profile, board).
        entity_id: The id that did not resolve.
    """

    code = "EntityNotFound"

    def __init__(self, kind: str, entity_id: UUID | None) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"EntityNotFound: no {kind} with id {entity_id}")


class GenesisAlreadyPerformedError(TaskLedgerError):
    """Raised when genesis runs against a store that already has a board."""

    code = "GenesisAlreadyPerformed"

    def __init__(self, board_id: UUID) -> None:
        self.board_id = board_id
        super().__init__(
            f"GenesisAlreadyPerformed: board {board_id} already exists"
        )
