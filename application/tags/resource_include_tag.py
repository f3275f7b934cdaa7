# application/tags/resource_include_tag.py
from __future__ import annotations

from typing import Optional

from application.exceptions import TagError
from application.ports.logger import LoggerPort
from application.services.resource_url_resolver import (
    DEFAULT_RESOURCE_CONTEXT,
    ResourceUrlResolver,
)
from application.tags.base import EVAL_PAGE, SKIP_BODY, TagSupport
from domain.resource_request import AttributeScope, VariableName


class ResourceIncludeTag(TagSupport):
    """
    Resolve the URL of a static resource, preferring a resource-serving
    web application over the current one.

    The URL is computed in do_start_tag. do_end_tag then either stores it
    under ``var`` or prints it to the page output, never both.
    """

    def __init__(self, logger: LoggerPort, default_base: str = DEFAULT_RESOURCE_CONTEXT):
        super().__init__()
        self._logger = logger
        self._default_base = default_base
        self.value: Optional[str] = None
        self.var: Optional[str] = None
        self.scope: Optional[str] = None
        self._url: Optional[str] = None

    @property
    def url(self) -> Optional[str]:
        return self._url

    def do_start_tag(self) -> int:
        resolver = ResourceUrlResolver(
            servlet_context=self.page_context.servlet_context,
            logger=self._logger,
            default_base=self._default_base,
        )
        self._url = resolver.resolve_path(self.value or "")
        return SKIP_BODY

    def do_end_tag(self) -> int:
        page_context = self.page_context
        if self._url is None:
            raise TagError("do_end_tag called before do_start_tag")

        if self.var is not None:
            name = VariableName(self.var).value
            scope = AttributeScope.parse(self.scope)
            page_context.set_attribute(name, self._url, scope)
            self._logger.debug(
                "resource_include.stored", var=name, scope=scope.value, url=self._url
            )
            return EVAL_PAGE

        try:
            page_context.get_out().print(self._url)
        except OSError as exc:
            self._logger.error("resource_include.write_failed", url=self._url, error=str(exc))
            raise
        self._logger.debug("resource_include.printed", url=self._url)
        return EVAL_PAGE

    def release(self) -> None:
        super().release()
        self.value = None
        self.var = None
        self.scope = None
        self._url = None
