"""
Cart state transitions

Cart contents are an immutable CartState; every change goes through
reduce(state, action), which returns a new state or the same object when
the action does not apply. CartStore holds the current state and notifies
subscribers after each change.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..models.cart import CartLine, CartState, LineKey

logger = logging.getLogger(__name__)


# ==================== Actions ====================

@dataclass(frozen=True)
class AddLine:
    product_id: str
    size: Optional[str] = None
    color: Optional[str] = None
    quantity: int = 1

    @property
    def key(self) -> LineKey:
        return LineKey(self.product_id, self.size, self.color)


@dataclass(frozen=True)
class RemoveLine:
    product_id: str
    size: Optional[str] = None
    color: Optional[str] = None

    @property
    def key(self) -> LineKey:
        return LineKey(self.product_id, self.size, self.color)


@dataclass(frozen=True)
class SetLineQuantity:
    product_id: str
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None

    @property
    def key(self) -> LineKey:
        return LineKey(self.product_id, self.size, self.color)


@dataclass(frozen=True)
class ClearCart:
    pass


CartAction = Union[AddLine, RemoveLine, SetLineQuantity, ClearCart]


# ==================== Reducer ====================

def _add_line(state: CartState, action: AddLine) -> CartState:
    if not isinstance(action.quantity, int) or action.quantity <= 0:
        return state

    key = action.key
    if state.find(key) is None:
        return CartState(lines=state.lines + (CartLine(key=key, quantity=action.quantity),))

    return CartState(lines=tuple(
        line.with_quantity(line.quantity + action.quantity) if line.key == key else line
        for line in state.lines
    ))


def _remove_line(state: CartState, key: LineKey) -> CartState:
    if state.find(key) is None:
        return state
    return CartState(lines=tuple(line for line in state.lines if line.key != key))


def _set_line_quantity(state: CartState, action: SetLineQuantity) -> CartState:
    key = action.key
    existing = state.find(key)
    if existing is None:
        return state
    if action.quantity <= 0:
        return _remove_line(state, key)
    if existing.quantity == action.quantity:
        return state

    return CartState(lines=tuple(
        line.with_quantity(action.quantity) if line.key == key else line
        for line in state.lines
    ))


def reduce(state: CartState, action: CartAction) -> CartState:
    """Apply an action to the cart, returning the resulting state"""
    if isinstance(action, AddLine):
        return _add_line(state, action)
    if isinstance(action, RemoveLine):
        return _remove_line(state, action.key)
    if isinstance(action, SetLineQuantity):
        return _set_line_quantity(state, action)
    if isinstance(action, ClearCart):
        return state if state.is_empty() else CartState()
    raise TypeError(f"Unknown cart action: {action!r}")


# ==================== Store ====================

Listener = Callable[[CartState], None]


class CartStore:
    """
    Observable holder of one shopper's cart.

    Malformed input (non-positive quantities on add, unknown lines) is
    ignored rather than raised; the store never performs I/O.
    """

    def __init__(self, state: Optional[CartState] = None):
        self._state = state or CartState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return self._state.lines

    @property
    def total_items(self) -> int:
        return self._state.total_items

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it"""
        if listener not in self._listeners:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: CartAction) -> CartState:
        """Run an action through the reducer and notify on change"""
        new_state = reduce(self._state, action)
        if new_state is self._state:
            logger.debug(f"Cart action had no effect: {action}")
            return self._state

        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    def add_line(
        self,
        product_id: str,
        size: Optional[str] = None,
        color: Optional[str] = None,
        quantity: int = 1,
    ) -> CartState:
        return self.dispatch(AddLine(product_id, size, color, quantity))

    def remove_line(
        self,
        product_id: str,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> CartState:
        return self.dispatch(RemoveLine(product_id, size, color))

    def set_line_quantity(
        self,
        product_id: str,
        quantity: int,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> CartState:
        return self.dispatch(SetLineQuantity(product_id, quantity, size, color))

    def clear(self) -> CartState:
        return self.dispatch(ClearCart())
