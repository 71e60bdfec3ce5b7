"""
Serialization participation interface.

Objects that persist through the field-list mechanism describe their state as
an ordered list of ``(name, value)`` pairs and accept the same list back on
load. Derived types extend the list of their base instead of replacing it, so
base and derived state always round-trip together and in a fixed order.
"""

from __future__ import annotations

from typing import Any, List, Protocol, Sequence, Tuple, runtime_checkable

Field = Tuple[str, Any]


@runtime_checkable
class ISerializable(Protocol):
    """
    Domain-level contract for field-list serialization.

    Notes
    -----
    - The order of the returned fields is part of the persisted format: a
      save and a later load of the same type must agree on it.
    - The wire format itself is owned by the serialization infrastructure,
      not by the implementing object.
    """

    def serialization_fields(self) -> List[Field]:
        """
        Return the ordered ``(name, value)`` pairs to persist.
        """
        ...

    def load_serialization_fields(self, fields: Sequence[Field]) -> None:
        """
        Restore state from ordered ``(name, value)`` pairs.

        Parameters
        ----------
        fields : Sequence[Field]
            Pairs in the order produced by `serialization_fields()`.
        """
        ...
