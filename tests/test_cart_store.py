import pytest

from localthread.models.cart import CartState, LineKey
from localthread.services.cart import (
    AddLine,
    CartStore,
    ClearCart,
    RemoveLine,
    SetLineQuantity,
    reduce,
)


def line_summary(store: CartStore):
    return [(l.product_id, l.size, l.color, l.quantity) for l in store.lines]


class TestLineKey:
    def test_missing_variants_compare_equal(self):
        assert LineKey("p1") == LineKey("p1", None, None)
        assert LineKey("p1", "", "") == LineKey("p1", None, None)

    def test_variants_distinguish_keys(self):
        assert LineKey("p1", "M", "red") != LineKey("p1", "L", "red")
        assert LineKey("p1", "M") != LineKey("p1", "M", "red")

    def test_hashable(self):
        assert len({LineKey("p1", "M"), LineKey("p1", "M", "")}) == 1


class TestReducer:
    def test_add_appends_new_line(self):
        state = reduce(CartState(), AddLine("p1", "M", "red", 2))
        assert len(state.lines) == 1
        assert state.lines[0].key == LineKey("p1", "M", "red")
        assert state.total_items == 2

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_add_non_positive_quantity_is_noop(self, quantity):
        state = CartState()
        assert reduce(state, AddLine("p1", quantity=quantity)) is state

    def test_remove_missing_line_returns_same_state(self):
        state = reduce(CartState(), AddLine("p1"))
        assert reduce(state, RemoveLine("p2")) is state

    def test_set_quantity_on_missing_line_is_noop(self):
        state = reduce(CartState(), AddLine("p1"))
        assert reduce(state, SetLineQuantity("p1", 5, size="M")) is state

    def test_clear_empty_cart_returns_same_state(self):
        state = CartState()
        assert reduce(state, ClearCart()) is state

    def test_does_not_mutate_input_state(self):
        before = reduce(CartState(), AddLine("p1", quantity=1))
        after = reduce(before, AddLine("p1", quantity=4))
        assert before.lines[0].quantity == 1
        assert after.lines[0].quantity == 5

    def test_unknown_action_raises(self):
        with pytest.raises(TypeError):
            reduce(CartState(), object())


class TestCartStore:
    def test_quantity_accumulates_on_same_line(self):
        store = CartStore()
        store.add_line("p", "M", "red", 2)
        store.add_line("p", "M", "red", 3)

        assert line_summary(store) == [("p", "M", "red", 5)]
        assert store.total_items == 5

    def test_identity_distinctness(self):
        store = CartStore()
        store.add_line("p", "M", "red", 1)
        store.add_line("p", "L", "red", 1)

        assert len(store.lines) == 2
        assert store.total_items == 2

    def test_insertion_order_is_kept(self):
        store = CartStore()
        store.add_line("b")
        store.add_line("a")
        store.add_line("b")

        assert [l.product_id for l in store.lines] == ["b", "a"]

    @pytest.mark.parametrize("quantity", [1, 7])
    def test_add_then_remove_leaves_line_absent(self, quantity):
        store = CartStore()
        store.add_line("keep")
        store.add_line("p", "S", "blue", quantity)
        store.remove_line("p", "S", "blue")

        assert line_summary(store) == [("keep", None, None, 1)]
        assert store.total_items == 1

    def test_remove_missing_line_leaves_store_unchanged(self):
        store = CartStore()
        store.add_line("p", "M", quantity=2)
        before = store.state

        store.remove_line("p", "L")
        store.remove_line("other")

        assert store.state is before
        assert store.total_items == 2

    def test_remove_requires_exact_identity(self):
        store = CartStore()
        store.add_line("p", "M", "red")
        store.remove_line("p")

        assert store.total_items == 1

    def test_set_quantity_replaces(self):
        store = CartStore()
        store.add_line("p", quantity=3)
        store.set_line_quantity("p", 1)

        assert line_summary(store) == [("p", None, None, 1)]

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_set_quantity_non_positive_removes(self, quantity):
        store = CartStore()
        store.add_line("p", "M", quantity=3)
        store.set_line_quantity("p", quantity, size="M")

        assert store.lines == ()
        assert store.total_items == 0

    def test_set_quantity_does_not_create_line(self):
        store = CartStore()
        store.set_line_quantity("p", 4)
        assert store.lines == ()

    def test_clear_resets_fully(self):
        store = CartStore()
        store.add_line("a", quantity=2)
        store.add_line("b", "M", "red", 3)
        store.clear()

        assert store.lines == ()
        assert store.total_items == 0

    def test_total_items_tracks_adds_minus_removals(self):
        store = CartStore()
        store.add_line("a", quantity=2)
        store.add_line("b", quantity=3)
        store.add_line("c", "M", quantity=4)
        store.remove_line("b")
        store.set_line_quantity("c", 0, size="M")
        store.add_line("a", quantity=1)

        assert store.total_items == 2 + 3 + 4 + 1 - 3 - 4

    def test_subscribers_notified_only_on_change(self):
        store = CartStore()
        seen = []
        store.subscribe(seen.append)

        store.add_line("a")
        store.remove_line("missing")
        store.add_line("a", quantity=0)
        store.clear()

        assert [s.total_items for s in seen] == [1, 0]

    def test_unsubscribe_stops_notifications(self):
        store = CartStore()
        seen = []
        unsubscribe = store.subscribe(seen.append)

        store.add_line("a")
        unsubscribe()
        store.add_line("b")

        assert len(seen) == 1
