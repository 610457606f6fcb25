"""Test data factories for string resource testing.

Provides deterministic test data builders for:
- ResourceCatalog
- CatalogStringResourceLoader
- Requester trees with session contexts
- Instrumented loaders for call counting
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from unittest.mock import Mock

from localizer.resources import (
    CatalogStringResourceLoader,
    Locale,
    ResourceCatalog,
    SessionContext,
    StringResourceLoader,
)
from localizer.resources.models import parse_variant_tag


def make_resource_catalog(
    locale: Optional[Locale] = None,
    style: Optional[str] = None,
    messages: Optional[Dict[str, str]] = None,
    loaded_at: Optional[str] = None,
) -> ResourceCatalog:
    """Create a ResourceCatalog instance.

    Args:
        locale: Locale for the catalog (None for the base catalog).
        style: Style for the catalog.
        messages: Flat {key: message} mapping.
        loaded_at: ISO 8601 timestamp.
    """
    if messages is None:
        messages = {
            "greeting": "Hello {name}",
            "signup.title": "Sign up",
        }

    return ResourceCatalog(
        locale=locale,
        style=style,
        messages=messages,
        loaded_at=loaded_at or "2024-01-01T00:00:00Z",
    )


def make_catalog_loader(bundles: Dict[Any, Dict[str, str]]) -> CatalogStringResourceLoader:
    """Create a catalog loader from {variant tag: messages}.

    Tags read "[<locale>][@<style>]" or are (locale, style) tuples.

    Example:
        make_catalog_loader({"": {"title": "Title"}, "fr": {"title": "Titre"}})
    """
    catalogs = []
    for tag, messages in bundles.items():
        locale, style = parse_variant_tag(tag)
        catalogs.append(make_resource_catalog(locale=locale, style=style, messages=messages))
    return CatalogStringResourceLoader(catalogs)


def make_spy_loader(messages: Optional[Dict[str, str]] = None) -> Mock:
    """Create a loader mock answering from a flat mapping.

    The mock records every load() call for call-count assertions.
    """
    messages = messages or {}
    loader = Mock(spec=StringResourceLoader)
    loader.name = "SpyLoader"
    loader.load.side_effect = lambda requester, key, locale, style: messages.get(key)
    return loader


@dataclass
class Node:
    """Minimal requester: an id, a parent and an optional session."""

    id: str
    parent: Optional["Node"] = None
    session: Any = None


def make_requester_tree(
    locale: Optional[str] = None, style: Optional[str] = None
) -> Node:
    """Create page -> form -> field and return the field.

    The page carries the session context.
    """
    session = SessionContext(
        locale=Locale.from_string(locale) if locale else None, style=style
    )
    page = Node("page", session=session)
    form = Node("form", parent=page)
    return Node("field", parent=form)
