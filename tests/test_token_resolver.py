"""Unit tests for TokenResolver bindings and binder callbacks."""

import pytest

from linkweaver.core.interfaces.token_binder import TokenBinder
from linkweaver.core.managers.token_resolver import TokenResolver


class User:
    def __init__(self, id, name="jane"):
        self.id = id
        self.name = name


class UserIdBinder:
    def __init__(self, resolver: TokenResolver):
        self.resolver = resolver
        self.calls = 0

    def bind(self, obj):
        self.calls += 1
        self.resolver.bind("userId", obj.id)


@pytest.fixture
def resolver():
    return TokenResolver()


class TestBindings:
    def test_bind_returns_resolver_for_chaining(self, resolver):
        assert resolver.bind("a", "1").bind("b", "2") is resolver
        assert resolver.resolve("{a}/{b}") == "1/2"

    def test_bind_overwrites(self, resolver):
        resolver.bind("a", "1").bind("a", "2")
        assert resolver.bindings == {"a": "2"}

    def test_bind_none_removes(self, resolver):
        resolver.bind("a", "1").bind("a", None)
        assert "a" not in resolver
        assert resolver.resolve("/x/{a}") == "/x/{a}"

    def test_bind_then_unbind_restores_unresolved_state(self, resolver):
        pattern = "/users/{userId}"
        resolver.bind("userId", "42")
        assert resolver.resolve(pattern) == "/users/42"
        resolver.remove("userId")
        assert resolver.resolve(pattern) == pattern

    def test_non_string_values_are_stored_as_strings(self, resolver):
        resolver.bind("userId", 42).bind("active", True)
        assert resolver.bindings == {"userId": "42", "active": "True"}
        assert resolver.resolve("/users/{userId}") == "/users/42"

    def test_binder_may_bind_non_string_values(self, resolver):
        resolver.add_binder(lambda user: resolver.bind("userId", user.id))
        assert resolver.resolve("/users/{userId}", User(7)) == "/users/7"

    def test_remove_absent_is_noop(self, resolver):
        resolver.remove("missing")
        assert resolver.bindings == {}

    def test_initial_bindings(self):
        resolver = TokenResolver({"a": "1", "b": None})
        assert resolver.bindings == {"a": "1"}
        assert resolver.get("a") == "1"
        assert resolver.get("b") is None

    def test_bindings_snapshot_is_a_copy(self, resolver):
        resolver.bind("a", "1")
        snapshot = resolver.bindings
        snapshot["a"] = "changed"
        assert resolver.get("a") == "1"

    def test_clear_keeps_binders(self, resolver):
        binder = UserIdBinder(resolver)
        resolver.add_binder(binder).bind("a", "1")
        resolver.clear()
        assert resolver.bindings == {}
        assert resolver.resolve("/users/{userId}", User("5")) == "/users/5"

    def test_reset_removes_bindings_and_binders(self, resolver):
        binder = UserIdBinder(resolver)
        resolver.add_binder(binder).bind("userId", "1")
        resolver.reset()
        assert resolver.resolve("/users/{userId}") == "/users/{userId}"
        assert resolver.resolve("/users/{userId}", User("5")) == "/users/{userId}"
        assert binder.calls == 0

    def test_repr_lists_bindings(self, resolver):
        resolver.bind("a", "1")
        assert repr(resolver) == "TokenResolver{a=1}"


class TestResolve:
    def test_resolve_without_object_skips_binders(self, resolver):
        binder = UserIdBinder(resolver)
        resolver.add_binder(binder)
        assert resolver.resolve("/users/{userId}") == "/users/{userId}"
        assert resolver.resolve("/users/{userId}", None) == "/users/{userId}"
        assert binder.calls == 0

    def test_resolve_with_object_calls_binders(self, resolver):
        resolver.add_binder(UserIdBinder(resolver))
        assert resolver.resolve("/users/{userId}", User("99")) == "/users/99"

    def test_binder_may_be_plain_callable(self, resolver):
        resolver.add_binder(lambda user: resolver.bind("name", user.name))
        assert resolver.resolve("/by-name/{name}", User("1", "bob")) == "/by-name/bob"

    def test_add_none_binder_is_noop(self, resolver):
        assert resolver.add_binder(None) is resolver
        assert resolver.binders == []

    def test_binder_satisfies_protocol(self, resolver):
        assert isinstance(UserIdBinder(resolver), TokenBinder)

    def test_binders_run_in_registration_order(self, resolver):
        resolver.add_binder(lambda obj: resolver.bind("t", "first"))
        resolver.add_binder(lambda obj: resolver.bind("t", "second"))
        assert resolver.resolve("{t}", object()) == "second"

    def test_failing_binder_propagates_and_stops_later_binders(self, resolver):
        calls = []

        def failing(obj):
            calls.append("failing")
            raise KeyError("id")

        resolver.add_binder(failing)
        resolver.add_binder(lambda obj: calls.append("later"))

        with pytest.raises(KeyError):
            resolver.resolve("/users/{userId}", object())
        assert calls == ["failing"]

    def test_reset_then_resolve_returns_pattern_unchanged(self, resolver):
        resolver.bind("a", "1")
        resolver.reset()
        assert resolver.resolve("/{a}/{b}") == "/{a}/{b}"


class TestResolveAll:
    def test_preserves_order_and_length(self, resolver):
        resolver.bind("a", "1")
        patterns = ["/{a}", "/{b}", "/static", "/{a}/{a}"]
        resolved = resolver.resolve_all(patterns)
        assert len(resolved) == len(patterns)
        assert resolved == ["/1", "/{b}", "/static", "/1/1"]

    def test_empty_sequence(self, resolver):
        assert resolver.resolve_all([]) == []

    def test_binders_called_once_for_all_patterns(self, resolver):
        binder = UserIdBinder(resolver)
        resolver.add_binder(binder)
        resolved = resolver.resolve_all(["/users/{userId}", "/users/{userId}/posts"], User("7"))
        assert resolved == ["/users/7", "/users/7/posts"]
        assert binder.calls == 1

    def test_accepts_any_iterable(self, resolver):
        resolver.bind("a", "1")
        assert resolver.resolve_all(p for p in ("{a}", "{a}{a}")) == ["1", "11"]
