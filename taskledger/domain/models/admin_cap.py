"""Admin capability: a scarce, move-only credential.

Privileged operations take an AdminCap as a typed parameter. Holding a
live instance is the whole authorization proof; there is no role table
and no flag to flip.

Scarcity rules:
- No public constructor. ``mint_admin_cap`` is called by genesis only.
- No duplication. ``copy``, ``deepcopy`` and pickling raise TypeError.
- Moves, not copies. ``transfer()`` hands back a fresh live reference and
  spends the old one, so one live reference exists per credential.
"""

from __future__ import annotations

from typing import Any, NoReturn
from uuid import UUID

from taskledger.domain.errors.authorization import NotAdminError

_MINT_KEY = object()


class AdminCap:
    """Unforgeable admin credential.

    Attributes:
        id: Credential identifier, stable across transfers.
    """

    __slots__ = ("_id", "_live")

    def __init__(self, cap_id: UUID, *, _mint_key: object = None) -> None:
        if _mint_key is not _MINT_KEY:
            raise TypeError("AdminCap can only be minted by ledger genesis")
        self._id = cap_id
        self._live = True

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def is_live(self) -> bool:
        """False once this reference has been moved away by ``transfer()``."""
        return self._live

    def transfer(self) -> AdminCap:
        """Move the credential to a new holder.

        The returned instance is the only live reference afterwards; this
        one is spent and rejected by every privileged operation.

        Returns:
            A live AdminCap carrying the same id.

        Raises:
            NotAdminError: If this reference was already transferred away.
        """
        if not self._live:
            raise NotAdminError(f"AdminCap {self._id} was already transferred")
        self._live = False
        return AdminCap(self._id, _mint_key=_MINT_KEY)

    def __copy__(self) -> NoReturn:
        raise TypeError("AdminCap cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> NoReturn:
        raise TypeError("AdminCap cannot be copied")

    def __reduce__(self) -> NoReturn:
        raise TypeError("AdminCap cannot be serialized")

    def __repr__(self) -> str:
        state = "live" if self._live else "spent"
        return f"AdminCap(id={self._id}, {state})"


def mint_admin_cap(cap_id: UUID) -> AdminCap:
    """Mint a new credential. Only ledger genesis calls this."""
    return AdminCap(cap_id, _mint_key=_MINT_KEY)


def require_admin_cap(cap: object) -> AdminCap:
    """Check that ``cap`` is a live AdminCap.

    Args:
        cap: Whatever the caller presented as a credential.

    Returns:
        The same object, narrowed to AdminCap.

    Raises:
        NotAdminError: If ``cap`` is not an AdminCap or has been spent.
    """
    if not isinstance(cap, AdminCap):
        raise NotAdminError(f"expected AdminCap, got {type(cap).__name__}")
    if not cap.is_live:
        raise NotAdminError(f"AdminCap {cap.id} was transferred away")
    return cap
