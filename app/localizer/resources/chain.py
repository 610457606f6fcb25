"""Loader chain and the shared configuration object that owns it."""

import threading
from typing import Iterable, Iterator, Optional, Tuple

from localizer.logging import get_module_logger
from localizer.resources.loader import StringResourceLoader
from localizer.resources.models import ResolutionPolicy

logger = get_module_logger()


class LoaderChain:
    """Ordered loaders, first registered first tried.

    Mutations publish a new tuple under a lock; readers take snapshot()
    and iterate it without locking. Registration order is the only order.
    """

    def __init__(self, loaders: Iterable[StringResourceLoader] = ()):
        self._lock = threading.Lock()
        self._loaders: Tuple[StringResourceLoader, ...] = tuple(loaders)

    def snapshot(self) -> Tuple[StringResourceLoader, ...]:
        return self._loaders

    def add(self, loader: StringResourceLoader) -> None:
        """Append a loader at the lowest priority."""
        with self._lock:
            self._loaders = self._loaders + (loader,)
        logger.info("loader_registered", loader=loader.name, position=len(self) - 1)

    def insert(self, index: int, loader: StringResourceLoader) -> None:
        """Insert a loader at the given priority position."""
        with self._lock:
            loaders = list(self._loaders)
            loaders.insert(index, loader)
            self._loaders = tuple(loaders)
        logger.info("loader_registered", loader=loader.name, position=index)

    def remove(self, loader: StringResourceLoader) -> None:
        """Remove a loader.

        Raises:
            ValueError: If the loader is not registered.
        """
        with self._lock:
            loaders = list(self._loaders)
            loaders.remove(loader)
            self._loaders = tuple(loaders)
        logger.info("loader_removed", loader=loader.name)

    def clear(self) -> None:
        with self._lock:
            self._loaders = ()

    def __iter__(self) -> Iterator[StringResourceLoader]:
        return iter(self._loaders)

    def __len__(self) -> int:
        return len(self._loaders)


class LocalizerConfig:
    """Shared configuration read by the Localizer on every call.

    Attributes:
        loaders: The loader chain.
        policy: Missing resource policy. Replace it as a whole to reconfigure.
    """

    def __init__(
        self,
        loaders: Optional[Iterable[StringResourceLoader]] = None,
        policy: Optional[ResolutionPolicy] = None,
    ):
        self.loaders = LoaderChain(loaders or ())
        self.policy = policy or ResolutionPolicy()
