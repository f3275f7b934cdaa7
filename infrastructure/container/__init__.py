# infrastructure/container/__init__.py
from infrastructure.container.base_loader import ContainerLoadError, ContainerLoaderBase
from infrastructure.container.in_memory_page_context import BufferedOutputWriter, InMemoryPageContext
from infrastructure.container.in_memory_servlet_container import (
    InMemoryServletContainer,
    InMemoryServletContext,
)
from infrastructure.container.json_loader import JsonContainerLoader
from infrastructure.container.loader_registry import ContainerLoaderRegistry
from infrastructure.container.yaml_loader import YamlContainerLoader

__all__ = [
    "BufferedOutputWriter",
    "ContainerLoadError",
    "ContainerLoaderBase",
    "ContainerLoaderRegistry",
    "InMemoryPageContext",
    "InMemoryServletContainer",
    "InMemoryServletContext",
    "JsonContainerLoader",
    "YamlContainerLoader",
]
