"""String resource loader interface and implementations.

Defines the contract every loader in the chain honors and provides
catalog, YAML file, class-embedded and requester-scoped loaders.
"""

import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml

from localizer.logging import get_module_logger
from localizer.resources.models import (
    Locale,
    ResourceCatalog,
    Variant,
    fallback_variants,
    flatten_messages,
    parse_variant_tag,
    requester_path,
)

logger = get_module_logger()


class StringResourceLoader(ABC):
    """Abstract base for string resource loaders.

    A loader answers a single query. It may loosen locale and style
    internally, but it returns one string or None; an ordinary miss never
    raises. Loaders are shared between concurrent resolution calls.
    """

    @abstractmethod
    def load(
        self,
        requester: Any,
        key: str,
        locale: Optional[Locale],
        style: Optional[str],
    ) -> Optional[str]:
        """Look up a string.

        Args:
            requester: Entity asking for the string (may be None).
            key: Lookup key.
            locale: Locale to look up (None for the loader's default).
            style: Style to look up (may be None).

        Returns:
            The string, or None if this loader has no match.
        """

    @property
    def name(self) -> str:
        return type(self).__name__


class CatalogStringResourceLoader(StringResourceLoader):
    """Loader over in-memory catalogs keyed by (locale, style) variant.

    Lookups walk fallback_variants(): style and locale are loosened
    until a catalog holding the key is found.
    """

    def __init__(self, catalogs: Iterable[ResourceCatalog] = ()):
        self.catalogs: Dict[Variant, ResourceCatalog] = {}
        for catalog in catalogs:
            self.add_catalog(catalog)

    def add_catalog(self, catalog: ResourceCatalog) -> None:
        """Add a catalog, merging into an existing one for the same variant."""
        existing = self.catalogs.get(catalog.variant)
        if existing is None:
            self.catalogs[catalog.variant] = catalog
        else:
            existing.merge(catalog)

    def get_catalog(
        self, locale: Optional[Locale] = None, style: Optional[str] = None
    ) -> Optional[ResourceCatalog]:
        return self._get_catalogs().get((locale, style))

    def load(
        self,
        requester: Any,
        key: str,
        locale: Optional[Locale],
        style: Optional[str],
    ) -> Optional[str]:
        catalogs = self._get_catalogs()
        for variant in fallback_variants(locale, style):
            catalog = catalogs.get(variant)
            if catalog is None:
                continue
            message = catalog.get_message(key)
            if message is not None:
                return message
        return None

    def _get_catalogs(self) -> Dict[Variant, ResourceCatalog]:
        return self.catalogs


class YAMLStringResourceLoader(StringResourceLoader):
    """Loader for YAML string catalogs in a directory.

    Expects files named <bundle>[.<locale>][@<style>].yml, for example
    messages.yml, messages.fr-FR.yml, messages@dark.yml or
    messages.fr@dark.yml. All bundles for the same variant are merged.
    Nested keys are flattened with dots.

    Attributes:
        resources_dir: Path to directory containing YAML files.
        use_cache: Keep parsed catalogs between lookups.
    """

    def __init__(self, resources_dir: Path, use_cache: bool = True):
        """Initialize YAML string resource loader.

        Raises:
            ValueError: If resources_dir does not exist.
        """
        self.resources_dir = Path(resources_dir)
        self.use_cache = use_cache
        self._lock = threading.Lock()
        self._cache: Optional[CatalogStringResourceLoader] = None

        if not self.resources_dir.exists():
            raise ValueError(f"Resources directory not found: {self.resources_dir}")

        logger.info(
            "initialized_yaml_loader",
            resources_dir=str(self.resources_dir),
            use_cache=use_cache,
        )

    def load(
        self,
        requester: Any,
        key: str,
        locale: Optional[Locale],
        style: Optional[str],
    ) -> Optional[str]:
        return self._get_loader().load(requester, key, locale, style)

    def get_catalog(
        self, locale: Optional[Locale] = None, style: Optional[str] = None
    ) -> Optional[ResourceCatalog]:
        return self._get_loader().get_catalog(locale, style)

    def load_all(self) -> Dict[Variant, ResourceCatalog]:
        """Parse every YAML file in the directory into catalogs.

        Raises:
            ValueError: If a file cannot be parsed or is badly named.
        """
        catalogs: Dict[Variant, ResourceCatalog] = {}
        yaml_files = sorted(self.resources_dir.glob("*.yml")) + sorted(
            self.resources_dir.glob("*.yaml")
        )
        loaded_at = datetime.now(timezone.utc).isoformat()

        for yaml_file in yaml_files:
            locale, style = self._variant_from_filename(yaml_file)

            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if not data:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                continue

            catalog = catalogs.setdefault(
                (locale, style),
                ResourceCatalog(locale=locale, style=style, loaded_at=loaded_at),
            )
            catalog.messages.update(flatten_messages(data))

        logger.info(
            "loaded_string_resources",
            resources_dir=str(self.resources_dir),
            file_count=len(yaml_files),
            catalog_count=len(catalogs),
        )
        return catalogs

    def clear_cache(self) -> None:
        """Drop cached catalogs; the next lookup re-reads the directory."""
        with self._lock:
            self._cache = None
        logger.info("cleared_string_resource_cache")

    @staticmethod
    def _variant_from_filename(yaml_file: Path) -> Variant:
        name, marker, style = yaml_file.stem.partition("@")
        _, _, locale_part = name.partition(".")
        return parse_variant_tag(f"{locale_part}{marker}{style}")

    def _get_loader(self) -> CatalogStringResourceLoader:
        if not self.use_cache:
            return CatalogStringResourceLoader(self.load_all().values())

        # Read once: clear_cache() may reset the attribute concurrently.
        cached = self._cache
        if cached is None:
            with self._lock:
                cached = self._cache
                if cached is None:
                    cached = CatalogStringResourceLoader(self.load_all().values())
                    self._cache = cached
        return cached


class ClassStringResourceLoader(StringResourceLoader):
    """Loader for string bundles embedded in the requester's class.

    Walks type(requester).__mro__ and reads a ``string_resources`` class
    attribute mapping variant tags to messages::

        class SignupForm(Form):
            string_resources = {
                "": {"title": "Sign up"},
                "fr": {"title": "Inscription"},
                "@dark": {"title": "SIGN UP"},
                ("fr", "dark"): {"title": "INSCRIPTION"},
            }

    Keys are "[<locale>][@<style>]" tags or (locale, style) tuples.
    Subclass bundles shadow base class bundles.
    """

    attribute = "string_resources"

    def __init__(self):
        self._lock = threading.Lock()
        self._by_class: Dict[type, CatalogStringResourceLoader] = {}

    def load(
        self,
        requester: Any,
        key: str,
        locale: Optional[Locale],
        style: Optional[str],
    ) -> Optional[str]:
        if requester is None:
            return None

        for cls in type(requester).__mro__:
            if self.attribute not in vars(cls):
                continue
            message = self._loader_for(cls).load(requester, key, locale, style)
            if message is not None:
                return message
        return None

    def _loader_for(self, cls: type) -> CatalogStringResourceLoader:
        loader = self._by_class.get(cls)
        if loader is None:
            with self._lock:
                loader = self._by_class.get(cls)
                if loader is None:
                    loader = CatalogStringResourceLoader(
                        self._catalogs_from_bundles(cls, vars(cls)[self.attribute])
                    )
                    self._by_class[cls] = loader
        return loader

    @staticmethod
    def _catalogs_from_bundles(cls: type, bundles: Dict[Any, Any]) -> List[ResourceCatalog]:
        catalogs = []
        for tag, messages in bundles.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_class_bundle", owner=cls.__qualname__, tag=tag
                )
                continue
            locale, style = parse_variant_tag(tag)
            catalogs.append(
                ResourceCatalog(
                    locale=locale, style=style, messages=flatten_messages(messages)
                )
            )
        return catalogs


class RequesterStringResourceLoader(StringResourceLoader):
    """Scopes lookups by the requester's container ancestry.

    For a requester with ancestry ids page -> form -> field, asks the
    delegate for "page.form.field.<key>", then "form.field.<key>", then
    "field.<key>". The unscoped key is left to later loaders in the chain.
    Without a requester this loader never matches.
    """

    def __init__(self, delegate: StringResourceLoader):
        self.delegate = delegate

    def load(
        self,
        requester: Any,
        key: str,
        locale: Optional[Locale],
        style: Optional[str],
    ) -> Optional[str]:
        if requester is None:
            return None

        path = requester_path(requester)
        for start in range(len(path)):
            scoped_key = ".".join(path[start:] + [key])
            message = self.delegate.load(requester, scoped_key, locale, style)
            if message is not None:
                return message
        return None
