"""Normalization of SOAP "zero, one or many" fields.

SOAP serializes a repeated element as nothing, a bare object, or an array,
depending on how many children there are. Inside the library a repeated
field is always a ``Repeated`` value (Empty, One or Many); the ambiguous form
only exists at the wire boundary, in ``from_wire`` and ``to_wire``.
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from ..client.errors import InvalidArgumentError

T = TypeVar('T')


@dataclass(frozen=True)
class Empty:
    """No element."""

    def items(self) -> List[Any]:
        return []


@dataclass(frozen=True)
class One(Generic[T]):
    """Exactly one element, serialized as a bare object."""
    value: T

    def items(self) -> List[T]:
        return [self.value]


@dataclass(frozen=True)
class Many(Generic[T]):
    """An array of elements (possibly of length 0 or 1)."""
    values: Tuple[T, ...]

    def items(self) -> List[T]:
        return list(self.values)


Repeated = Union[Empty, One[T], Many[T]]


def from_wire(value: Any) -> Repeated:
    """Classify a wire value.

    None becomes Empty, a list or tuple becomes Many, anything else One.
    """
    if value is None:
        return Empty()
    if isinstance(value, (list, tuple)):
        return Many(tuple(value))
    return One(value)


def to_wire(repeated: Repeated) -> Any:
    """Inverse of from_wire."""
    if isinstance(repeated, Empty):
        return None
    if isinstance(repeated, One):
        return repeated.value
    if isinstance(repeated, Many):
        return list(repeated.values)
    raise InvalidArgumentError(f"Not a repeated value: {repeated!r}")


def normalize(value: Any) -> List[Any]:
    """Return the elements of a wire field as a list, whatever its shape."""
    return from_wire(value).items()


def nested(container: Optional[dict], wrapper: str, element: str) -> List[Any]:
    """Return ``container[wrapper][element]`` as a list.

    Composite properties come wrapped twice on the wire, e.g.
    ``pageRegions.pageRegion``; either level may be missing or null.

    Example:
        >>> nested({"pageRegions": {"pageRegion": {"name": "DEFAULT"}}}, "pageRegions", "pageRegion")
        [{'name': 'DEFAULT'}]
    """
    if not container:
        return []
    outer = container.get(wrapper)
    if not outer:
        return []
    return normalize(outer.get(element))


def collapse(items: Sequence[T], always_list: bool = True) -> Repeated:
    """Choose the outbound shape for a list of elements.

    Args:
        items: Elements in wire order
        always_list: If True the result is always Many, so a single element
            still goes out as a one-element array. If False the shape follows
            the count: nothing, a bare object, or an array.
    """
    if always_list:
        return Many(tuple(items))
    if not items:
        return Empty()
    if len(items) == 1:
        return One(items[0])
    return Many(tuple(items))


def flatten(items: Sequence[T], always_list: bool = True) -> Any:
    """Shortcut for ``to_wire(collapse(items, always_list))``."""
    return to_wire(collapse(items, always_list))
