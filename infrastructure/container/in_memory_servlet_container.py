# infrastructure/container/in_memory_servlet_container.py
from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock
from typing import Dict, List, Mapping, Optional

from domain.exceptions import ValidationError


def normalize_context_key(path: Optional[str]) -> str:
    # Root context is stored as "".
    if not path:
        return ""
    path = path.strip()
    if not path.startswith("/"):
        path = "/" + path
    return path.rstrip("/")


@dataclass
class InMemoryServletContext:
    context_path: str
    init_parameters: Dict[str, str] = field(default_factory=dict)
    container: Optional["InMemoryServletContainer"] = field(default=None, repr=False, compare=False)
    cross_context: bool = True

    def get_init_parameter(self, name: str) -> Optional[str]:
        return self.init_parameters.get(name)

    def get_context(self, uri_path: str) -> Optional["InMemoryServletContext"]:
        key = normalize_context_key(uri_path)
        if key == self.context_path:
            return self
        if not self.cross_context or self.container is None:
            return None
        return self.container.get(key)


@dataclass
class InMemoryServletContainer:
    _lock: Lock = field(default_factory=Lock, init=False)
    _contexts: Dict[str, InMemoryServletContext] = field(default_factory=dict, init=False)

    def deploy(
        self,
        context_path: str,
        init_parameters: Optional[Mapping[str, str]] = None,
        cross_context: bool = True,
    ) -> InMemoryServletContext:
        key = normalize_context_key(context_path)
        with self._lock:
            if key in self._contexts:
                raise ValidationError(f"Context already deployed: {key or '/'}")
            context = InMemoryServletContext(
                context_path=key,
                init_parameters=dict(init_parameters or {}),
                container=self,
                cross_context=cross_context,
            )
            self._contexts[key] = context
            return context

    def undeploy(self, context_path: str) -> bool:
        with self._lock:
            return self._contexts.pop(normalize_context_key(context_path), None) is not None

    def get(self, context_path: str) -> Optional[InMemoryServletContext]:
        with self._lock:
            return self._contexts.get(normalize_context_key(context_path))

    def contexts(self) -> List[InMemoryServletContext]:
        with self._lock:
            return [self._contexts[key] for key in sorted(self._contexts)]
