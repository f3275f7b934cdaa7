# application/tags/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from application.exceptions import TagError
from application.ports.page_context import PageContextPort

SKIP_BODY = 0
EVAL_PAGE = 6


class TagSupport(ABC):
    """Base for tags driven through the start/end/release lifecycle."""

    def __init__(self) -> None:
        self._page_context: Optional[PageContextPort] = None

    def set_page_context(self, page_context: PageContextPort) -> None:
        self._page_context = page_context

    @property
    def page_context(self) -> PageContextPort:
        if self._page_context is None:
            raise TagError(f"{type(self).__name__} has no page context")
        return self._page_context

    @abstractmethod
    def do_start_tag(self) -> int: ...

    def do_end_tag(self) -> int:
        return EVAL_PAGE

    def release(self) -> None:
        self._page_context = None
