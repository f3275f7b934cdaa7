# domain/context_path.py
from __future__ import annotations

from typing import Optional


def with_leading_slash(path: Optional[str]) -> str:
    if not path:
        return "/"
    if path.startswith("/"):
        return path
    return "/" + path


def join_context_path(base: str, resource_path: Optional[str]) -> str:
    """
    Join a context path and a resource path with exactly one slash between them.

    The root context ("" or "/") yields the resource path alone.
    """
    return (base or "").rstrip("/") + with_leading_slash(resource_path)


def normalize_context_base(path: Optional[str]) -> str:
    # Root context is "/"; every other base has a leading slash and no trailing one.
    return with_leading_slash((path or "").strip()).rstrip("/") or "/"
