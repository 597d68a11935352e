"""Parameter Store — tests for the per-request parameter accumulator.

Tests cover:
    - set/get upsert semantics and absent keys
    - entry() returns a single-key mapping, even for absent keys
    - seed() with and without the named-parameter prefix
    - unset/reset
"""

from backoffice.core.parameter_store import ParameterStore, param_key


def test_set_then_get_returns_value():
    store = ParameterStore()
    store.set("$menuId", 3)
    assert store.get("$menuId") == 3


def test_set_is_an_upsert():
    store = ParameterStore()
    store.set("$menuId", 3)
    store.set("$menuId", 4)
    assert store.entries() == {"$menuId": 4}


def test_get_missing_key_returns_none():
    assert ParameterStore().get("$nope") is None


def test_entry_returns_single_key_mapping():
    store = ParameterStore()
    store.set("$employeeId", 1)
    store.set("$name", "Ada")
    assert store.entry("$employeeId") == {"$employeeId": 1}


def test_entry_of_absent_key_maps_to_none():
    assert ParameterStore().entry("$employeeId") == {"$employeeId": None}


def test_seed_prefixed_marks_every_key_as_named_parameter():
    store = ParameterStore()
    store.seed({"name": "Soup", "price": 5}, prefixed=True)
    assert store.entries() == {"$name": "Soup", "$price": 5}


def test_seed_unprefixed_keeps_keys_verbatim():
    store = ParameterStore()
    store.seed({"title": "Lunch"})
    assert store.entries() == {"title": "Lunch"}


def test_seed_keeps_previously_bound_identifiers():
    store = ParameterStore()
    store.set("$menuId", 1)
    store.seed({"title": "Dinner"}, prefixed=True)
    assert store.entries() == {"$menuId": 1, "$title": "Dinner"}


def test_unset_and_reset():
    store = ParameterStore()
    store.seed({"a": 1, "b": 2}, prefixed=True)
    store.unset("$a")
    assert "$a" not in store
    assert "$b" in store
    store.reset()
    assert store.entries() == {}


def test_stores_are_independent():
    first, second = ParameterStore(), ParameterStore()
    first.set("$menuId", 1)
    assert second.entries() == {}


def test_param_key_prefixes_name():
    assert param_key("menuItemId") == "$menuItemId"
