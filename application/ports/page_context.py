from __future__ import annotations

from typing import Any, Optional, Protocol

from application.ports.servlet_context import ServletContextPort
from domain.resource_request import AttributeScope


class OutputWriterPort(Protocol):
    def print(self, value: str) -> None:
        ...


class PageContextPort(Protocol):
    servlet_context: ServletContextPort

    def set_attribute(
        self, name: str, value: Any, scope: AttributeScope = AttributeScope.PAGE
    ) -> None:
        ...

    def get_attribute(
        self, name: str, scope: AttributeScope = AttributeScope.PAGE
    ) -> Optional[Any]:
        ...

    def get_out(self) -> OutputWriterPort:
        ...
