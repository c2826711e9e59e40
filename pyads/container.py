from typing import Any, Iterator, Protocol, runtime_checkable


@runtime_checkable
class Container(Protocol):
    """Shape shared by the sized, clearable containers."""

    def size(self) -> int:
        ...

    def clear(self):
        ...

    def contains(self, item: Any) -> bool:
        ...

    def items(self) -> Iterator[Any]:
        ...
