# infrastructure/container/in_memory_page_context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from application.ports.servlet_context import ServletContextPort
from domain.resource_request import AttributeScope


@dataclass
class BufferedOutputWriter:
    _chunks: List[str] = field(default_factory=list, init=False)

    def print(self, value: str) -> None:
        self._chunks.append(str(value))

    def getvalue(self) -> str:
        return "".join(self._chunks)


@dataclass
class InMemoryPageContext:
    servlet_context: ServletContextPort
    out: BufferedOutputWriter = field(default_factory=BufferedOutputWriter)
    _attributes: Dict[AttributeScope, Dict[str, Any]] = field(
        default_factory=lambda: {scope: {} for scope in AttributeScope},
        init=False,
    )

    def set_attribute(
        self, name: str, value: Any, scope: AttributeScope = AttributeScope.PAGE
    ) -> None:
        # None removes, as with PageContext.setAttribute.
        if value is None:
            self.remove_attribute(name, scope)
            return
        self._attributes[scope][name] = value

    def get_attribute(
        self, name: str, scope: AttributeScope = AttributeScope.PAGE
    ) -> Optional[Any]:
        return self._attributes[scope].get(name)

    def remove_attribute(self, name: str, scope: AttributeScope = AttributeScope.PAGE) -> None:
        self._attributes[scope].pop(name, None)

    def attributes(self, scope: AttributeScope = AttributeScope.PAGE) -> Dict[str, Any]:
        return dict(self._attributes[scope])

    def get_out(self) -> BufferedOutputWriter:
        return self.out
