"""Service layer."""

from .tag_resolver import TagResolver, resolve_tag

__all__ = ["TagResolver", "resolve_tag"]
