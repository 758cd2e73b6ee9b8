"""Checks for records that a payment, budget or transaction points at."""

from dataclasses import dataclass

from .errors import NotFoundError, ReferenceInactiveError


@dataclass(frozen=True)
class Reference:
    """The slice of a category or account the core needs to see."""

    id: int
    user_id: int
    is_active: bool = True
    deleted: bool = False

    @property
    def is_usable(self) -> bool:
        return self.is_active and not self.deleted


def ensure_active_reference(
    ref: Reference | None, kind: str, user_id: int | None = None
) -> Reference:
    """Return ``ref`` if it can be referenced, else raise.

    ``kind`` is the human label used in messages ("Category", "Account").
    A reference owned by someone other than ``user_id`` counts as missing.
    """
    if ref is None or (user_id is not None and ref.user_id != user_id):
        raise NotFoundError(f"{kind} not found")
    if not ref.is_usable:
        raise ReferenceInactiveError(f"{kind} not found or inactive")
    return ref
