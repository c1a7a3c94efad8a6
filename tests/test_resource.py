"""Unit tests for the Resource property bag and link attachment point."""

import pytest

from linkweaver.core.exceptions import DuplicatePropertyError, ResourceError
from linkweaver.core.interfaces.field_source import FieldSource
from linkweaver.core.managers.link_builder import LinkBuilder
from linkweaver.core.managers.token_resolver import TokenResolver
from linkweaver.core.models.resource import Resource


class Entity:
    def __init__(self, id):
        self.id = id

    def resource_fields(self):
        return [("id", self.id)]


class User(Entity):
    def __init__(self, id, email):
        super().__init__(id)
        self.email = email

    def resource_fields(self):
        return [*super().resource_fields(), ("email", self.email)]


class TestProperties:
    def test_with_property_chains(self):
        resource = Resource().with_property("a", 1).with_property("b", None)
        assert resource.properties == {"a": 1, "b": None}
        assert "b" in resource
        assert len(resource) == 2
        assert list(resource) == ["a", "b"]

    def test_duplicate_property_rejected(self):
        resource = Resource().with_property("a", 1)
        with pytest.raises(DuplicatePropertyError) as exc_info:
            resource.with_property("a", 2)
        assert exc_info.value.name == "a"
        assert isinstance(exc_info.value, ResourceError)
        assert resource.get("a") == 1

    def test_with_fields_includes_inherited_fields(self):
        user = User("42", "jane@example.com")
        assert isinstance(user, FieldSource)
        resource = Resource().with_fields(user)
        assert resource.properties == {"id": "42", "email": "jane@example.com"}

    def test_with_fields_rejects_existing_name(self):
        resource = Resource().with_property("id", "other")
        with pytest.raises(DuplicatePropertyError):
            resource.with_fields(Entity("1"))


class TestLinks:
    def test_with_link(self):
        link = LinkBuilder("/users/{userId}").with_rel("self").build(TokenResolver().bind("userId", "1"))
        resource = Resource().with_link(link)
        assert resource.links == [link]
        assert resource.links_by_rel("self") == [link]
        assert resource.links_by_rel("next") == []

    def test_with_link_values(self):
        resource = Resource().with_link_values("self", "/users/1", title="User")
        link = resource.links[0]
        assert link.rel == "self"
        assert link.href == "/users/1"
        assert link.attributes == {"title": "User"}

    def test_links_are_not_properties(self):
        resource = Resource().with_link_values("self", "/a").with_link_values("self", "/b")
        assert len(resource.links_by_rel("self")) == 2
        assert resource.properties == {}

    def test_links_list_is_a_copy(self):
        resource = Resource().with_link_values("self", "/a")
        resource.links.clear()
        assert len(resource.links) == 1
