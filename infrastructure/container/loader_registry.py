# infrastructure/container/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

from infrastructure.container.base_loader import ContainerLoaderBase, ContainerLoadError
from infrastructure.container.json_loader import JsonContainerLoader
from infrastructure.container.yaml_loader import YamlContainerLoader


class ContainerLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: Dict[str, ContainerLoaderBase] = {
            ".yaml": YamlContainerLoader(),
            ".yml": YamlContainerLoader(),
            ".json": JsonContainerLoader(),
        }

    def get_loader(self, path: Path) -> ContainerLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise ContainerLoadError(f"Unsupported container config format: {ext}")
        return loader
