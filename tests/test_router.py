"""Router tests."""

import threading

import pytest
from pathmatch_core.routing.router import Router, Route
from pathmatch_core.utils.config import Config


def get_user():
    return "user"


def get_me():
    return "me"


class TestRouter:
    """Test Router class."""

    def test_add_route(self):
        """Test adding routes."""
        router = Router()
        router.add("/users/:id", handler=get_user, name="user")
        assert len(router) == 1
        assert router.templates == ["/users/:id"]

    def test_add_is_chainable(self):
        """Test add returns the router."""
        router = Router().add("/a").add("/b")
        assert router.templates == ["/a", "/b"]

    def test_match_route(self):
        """Test matching returns route and params."""
        router = Router()
        router.add("/users/:id", handler=get_user, name="user", auth=True)

        found = router.match("/users/123")
        assert found is not None
        route, params = found
        assert isinstance(route, Route)
        assert route.name == "user"
        assert route.handler is get_user
        assert route.metadata == {"auth": True}
        assert params == {"id": "123"}

    def test_registration_order(self):
        """Test earlier routes win."""
        router = Router()
        router.add("/users/:id", handler=get_user)
        router.add("/users/me", handler=get_me)

        route, params = router.match("/users/me")
        assert route.handler is get_user
        assert params == {"id": "me"}

    def test_no_match(self):
        """Test unmatched path."""
        router = Router()
        router.add("/users/:id")
        assert router.match("/orders/1") is None

    def test_empty_router(self):
        """Test router with no routes."""
        assert Router().match("/") is None

    def test_duplicate_template_first_wins(self):
        """Test duplicate templates resolve to the first route."""
        router = Router()
        router.add("/users/:id", name="first")
        router.add("/users/:id", name="second")
        route, _ = router.match("/users/1")
        assert route.name == "first"

    def test_remove_route(self):
        """Test removing routes by name."""
        router = Router()
        router.add("/users/:id", name="user")
        router.add("/users/me", name="me")

        assert router.remove("user")
        assert not router.remove("user")
        route, params = router.match("/users/me")
        assert route.name == "me"
        assert params == {}

    def test_get_routes_returns_copy(self):
        """Test get_routes does not expose internal list."""
        router = Router().add("/a")
        router.get_routes().clear()
        assert len(router) == 1

    def test_custom_identifier(self):
        """Test router with custom identifier."""
        router = Router(parameter_identifier="$")
        router.add("/users/$id")
        _, params = router.match("/users/7")
        assert params == {"id": "7"}

    def test_empty_identifier_rejected(self):
        """Test invalid identifier."""
        with pytest.raises(ValueError):
            Router(parameter_identifier="")

    def test_from_config(self):
        """Test router built from config."""
        router = Router.from_config(Config(parameter_identifier="$"))
        assert router.parameter_identifier == "$"

    def test_match_url(self):
        """Test matching a full URL."""
        router = Router()
        router.add("/orders/:order/items/:item", name="item")

        route, params = router.match_url(
            "https://shop.local/orders/7/items/3?full=1", host="shop.local"
        )
        assert route.name == "item"
        assert params == {"order": "7", "item": "3"}

    def test_match_relative_url(self):
        """Test matching a relative URL against the host."""
        router = Router().add("/orders/:order")
        _, params = router.match_url("/orders/7#top", host="shop.local", protocol="https")
        assert params == {"order": "7"}

    def test_match_url_uses_config_defaults(self):
        """Test host and protocol default to the router config."""
        config = Config(host="api.local", protocol="https")
        router = Router.from_config(config).add("/orders/:order")

        assert router.config is config
        _, params = router.match_url("/orders/7?x=1")
        assert params == {"order": "7"}

    def test_match_url_protocol_override(self):
        """Test explicit protocol overrides the configured one."""
        router = Router.from_config(Config(protocol="https")).add("/a")
        with pytest.raises(ValueError):
            router.match_url("/a", protocol="ftp")

    def test_explicit_identifier_overrides_config(self):
        """Test constructor identifier wins over config."""
        router = Router("$", config=Config(parameter_identifier="{"))
        assert router.parameter_identifier == "$"

    def test_len_waits_for_lock(self):
        """Test len reads the route list under the lock."""
        router = Router().add("/a")
        result = []

        with router._lock:
            reader = threading.Thread(target=lambda: result.append(len(router)))
            reader.start()
            reader.join(timeout=0.1)
            assert reader.is_alive()

        reader.join(timeout=1)
        assert result == [1]
