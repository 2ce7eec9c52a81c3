"""Process-lifetime cache of the loaded module inventory."""

from __future__ import annotations

import threading
from typing import Callable, Iterable, Optional, Tuple

ModuleLister = Callable[[], Iterable[Optional[str]]]


class ModuleInventory:
    """
    Lazily enumerate the loaded modules once and keep the result.

    Listing modules is expensive and the result is treated as immutable
    for the life of the process, so there is no invalidation. Concurrent
    first callers block on the lock and observe the fully built tuple.
    If the lister raises, nothing is cached and the error propagates.
    """

    def __init__(self, lister: ModuleLister) -> None:
        self._lister = lister
        self._lock = threading.Lock()
        self._modules: Optional[Tuple[str, ...]] = None

    @property
    def is_loaded(self) -> bool:
        return self._modules is not None

    def get(self) -> Tuple[str, ...]:
        modules = self._modules
        if modules is not None:
            return modules

        with self._lock:
            if self._modules is None:
                self._modules = tuple(
                    identity for identity in self._lister() if identity
                )
            return self._modules
