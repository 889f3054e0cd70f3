"""Store capability shared by the account and workout services."""

from typing import List, Optional, Protocol, TypeVar


T = TypeVar("T")


class Store(Protocol[T]):
    """Key lookup persistence for one record type.

    ``save`` inserts records without an ``id`` (the store assigns one)
    and updates the others, returning the persisted record in both
    cases.  Updating an ``id`` that is no longer stored raises the
    matching ``NotFoundError``.  ``delete_by_id`` is a no‑op for unknown
    identifiers.
    """

    def find_all(self) -> List[T]: ...

    def find_by_id(self, record_id: int) -> Optional[T]: ...

    def save(self, record: T) -> T: ...

    def delete_by_id(self, record_id: int) -> None: ...
