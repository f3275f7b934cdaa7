from __future__ import annotations

import pytest

from domain.exceptions import ValidationError
from infrastructure.container.in_memory_servlet_container import (
    InMemoryServletContainer,
    normalize_context_key,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("/portal", "/portal"),
        ("portal", "/portal"),
        ("/portal/", "/portal"),
        ("/", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_context_key(raw, expected) -> None:
    assert normalize_context_key(raw) == expected


def test_cross_context_lookup_finds_deployed_webapp() -> None:
    # Arrange
    container = InMemoryServletContainer()
    portal = container.deploy("/portal")
    resources = container.deploy("/ResourceServingWebapp")

    # Act / Assert
    assert portal.get_context("/ResourceServingWebapp") is resources
    assert portal.get_context("ResourceServingWebapp/") is resources
    assert portal.get_context("/Missing") is None


def test_context_resolves_itself_without_cross_context() -> None:
    container = InMemoryServletContainer()
    portal = container.deploy("/portal", cross_context=False)
    container.deploy("/ResourceServingWebapp")

    assert portal.get_context("/portal") is portal
    assert portal.get_context("/ResourceServingWebapp") is None


def test_init_parameters_are_copied() -> None:
    params = {"resourceContextPath": "/cdn"}
    container = InMemoryServletContainer()
    portal = container.deploy("/portal", init_parameters=params)
    params["resourceContextPath"] = "/changed"

    assert portal.get_init_parameter("resourceContextPath") == "/cdn"
    assert portal.get_init_parameter("missing") is None


def test_deploy_twice_raises() -> None:
    container = InMemoryServletContainer()
    container.deploy("/portal")

    with pytest.raises(ValidationError, match="Context already deployed: /portal"):
        container.deploy("portal")


def test_undeploy_removes_context() -> None:
    container = InMemoryServletContainer()
    portal = container.deploy("/portal")
    container.deploy("/ResourceServingWebapp")

    assert container.undeploy("/ResourceServingWebapp") is True
    assert container.undeploy("/ResourceServingWebapp") is False
    assert portal.get_context("/ResourceServingWebapp") is None


def test_contexts_are_sorted_by_path() -> None:
    container = InMemoryServletContainer()
    container.deploy("/b")
    container.deploy("/a")
    container.deploy("/")

    assert [c.context_path for c in container.contexts()] == ["", "/a", "/b"]
