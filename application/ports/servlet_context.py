from __future__ import annotations

from typing import Optional, Protocol


class ServletContextPort(Protocol):
    context_path: str

    def get_init_parameter(self, name: str) -> Optional[str]:
        ...

    def get_context(self, uri_path: str) -> Optional["ServletContextPort"]:
        """
        Cross-context lookup. Returns None when no web application is
        reachable at the given path.
        """
        ...
