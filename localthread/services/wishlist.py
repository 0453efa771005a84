"""Wishlist state"""

from typing import Callable


class WishlistStore:
    """Ordered set of saved product ids with change notification"""

    def __init__(self, product_ids: tuple[str, ...] = ()):
        self._items: tuple[str, ...] = tuple(dict.fromkeys(product_ids))
        self._listeners: list[Callable[[tuple[str, ...]], None]] = []

    @property
    def product_ids(self) -> tuple[str, ...]:
        return self._items

    @property
    def total_items(self) -> int:
        return len(self._items)

    def contains(self, product_id: str) -> bool:
        return product_id in self._items

    def subscribe(self, listener: Callable[[tuple[str, ...]], None]) -> Callable[[], None]:
        if listener not in self._listeners:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, items: tuple[str, ...]) -> None:
        if items == self._items:
            return
        self._items = items
        for listener in list(self._listeners):
            listener(items)

    def add(self, product_id: str) -> None:
        if product_id not in self._items:
            self._set(self._items + (product_id,))

    def remove(self, product_id: str) -> None:
        self._set(tuple(pid for pid in self._items if pid != product_id))

    def toggle(self, product_id: str) -> bool:
        """Add if absent, remove if present; returns True when now saved"""
        if product_id in self._items:
            self.remove(product_id)
            return False
        self.add(product_id)
        return True

    def clear(self) -> None:
        self._set(())
