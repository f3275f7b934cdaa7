# application/services/resource_url_resolver.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from application.ports.logger import LoggerPort
from application.ports.servlet_context import ServletContextPort
from domain.context_path import join_context_path, normalize_context_base
from domain.resource_request import ResourceRequest

RESOURCE_CONTEXT_INIT_PARAM = "resourceContextPath"
DEFAULT_RESOURCE_CONTEXT = "/ResourceServingWebapp"

SOURCE_OVERRIDE = "override"
SOURCE_DEFAULT = "default"
SOURCE_LOCAL = "local"


def choose_context_base(
    override_param: Optional[str],
    default_base: str,
    current_base: str,
    context_exists: Callable[[str], bool],
) -> Tuple[str, str]:
    """
    Pick the base path a resource is served from.

    Returns (base, source) where source is one of "override", "default" or
    "local". An override that does not resolve falls through to the default.
    """
    if override_param and override_param.strip():
        override = normalize_context_base(override_param)
        if context_exists(override):
            return override, SOURCE_OVERRIDE
    default = normalize_context_base(default_base)
    if context_exists(default):
        return default, SOURCE_DEFAULT
    return current_base, SOURCE_LOCAL


def resolve_resource_url(
    resource_path: Optional[str],
    override_param: Optional[str],
    default_base: str,
    current_base: str,
    context_exists: Callable[[str], bool],
) -> str:
    base, _source = choose_context_base(
        override_param, default_base, current_base, context_exists
    )
    return join_context_path(base, resource_path)


@dataclass(frozen=True)
class ResourceUrlResolver:
    servlet_context: ServletContextPort
    logger: LoggerPort
    default_base: str = DEFAULT_RESOURCE_CONTEXT

    def request_for(self, resource_path: str) -> ResourceRequest:
        return ResourceRequest(
            resource_path=resource_path,
            override_context_param=self.servlet_context.get_init_parameter(
                RESOURCE_CONTEXT_INIT_PARAM
            ),
        )

    def resolve(self, request: ResourceRequest) -> str:
        base, source = choose_context_base(
            request.override_context_param,
            self.default_base,
            self.servlet_context.context_path,
            self._context_exists,
        )
        override = request.normalized_override
        if override is not None and source != SOURCE_OVERRIDE:
            self.logger.warning(
                "resource_url.override_unavailable",
                override=override,
                fallback=base,
            )

        url = join_context_path(base, request.resource_path)
        self.logger.debug(
            "resource_url.resolved",
            resource_path=request.normalized_path,
            base=base,
            source=source,
            url=url,
        )
        return url

    def resolve_path(self, resource_path: str) -> str:
        return self.resolve(self.request_for(resource_path))

    def _context_exists(self, path: str) -> bool:
        return self.servlet_context.get_context(path) is not None
