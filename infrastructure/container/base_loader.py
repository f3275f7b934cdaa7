# infrastructure/container/base_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from domain.exceptions import ValidationError
from infrastructure.container.in_memory_servlet_container import InMemoryServletContainer


class ContainerLoadError(Exception):
    pass


class ContainerLoaderBase(ABC):
    """Build an InMemoryServletContainer from a layout file."""

    def load_from_file(self, path: Union[str, Path]) -> InMemoryServletContainer:
        p = Path(path)
        if not p.exists():
            raise ContainerLoadError(f"Container config not found: {path}")

        try:
            data = self._load_file(p)
        except ContainerLoadError:
            raise
        except Exception as exc:
            raise ContainerLoadError(f"Container config is invalid: {path}: {exc}") from exc

        if data is None:
            raise ContainerLoadError(f"Container config is empty: {path}")
        if not isinstance(data, dict):
            raise ContainerLoadError(f"Container config is invalid: {path}")

        return self.load_from_dict(data)

    def load_from_dict(self, data: Dict[str, Any]) -> InMemoryServletContainer:
        contexts = data.get("contexts", [])
        if not isinstance(contexts, list):
            raise ContainerLoadError("'contexts' must be a list")

        container = InMemoryServletContainer()
        for entry in contexts:
            self._deploy(container, entry)
        return container

    def _deploy(self, container: InMemoryServletContainer, entry: Any) -> None:
        if not isinstance(entry, dict) or "path" not in entry:
            raise ContainerLoadError(f"Context entry requires a path: {entry!r}")

        init_parameters = entry.get("init_parameters") or {}
        if not isinstance(init_parameters, dict):
            raise ContainerLoadError(
                f"init_parameters must be a mapping for context {entry['path']}"
            )

        try:
            container.deploy(
                entry["path"] or "",
                init_parameters={str(k): str(v) for k, v in init_parameters.items()},
                cross_context=bool(entry.get("cross_context", True)),
            )
        except ValidationError as exc:
            raise ContainerLoadError(str(exc)) from exc

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...
