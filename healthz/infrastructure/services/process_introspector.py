"""Self-introspection of the running interpreter."""

from __future__ import annotations

import sys
from functools import cached_property
from importlib.metadata import PackageNotFoundError, packages_distributions, version
from pathlib import Path
from types import ModuleType
from typing import List, Mapping, Optional

from healthz.domain.ports.process_introspector import IProcessIntrospector
from healthz.shared import get_logger

logger = get_logger(__name__)


class ProcessIntrospector(IProcessIntrospector):
    """
    Describe the process through its entry module and ``sys.modules``.

    An identity is ``"<name>, Version=<version>"`` when a version can be
    found (installed distribution first, then ``__version__``), otherwise
    the bare module name. Only top-level modules are listed, in load order.
    """

    def __init__(
        self,
        entry_module: Optional[str] = None,
        modules: Optional[Mapping[str, Optional[ModuleType]]] = None,
    ) -> None:
        self._entry_module = entry_module
        self._modules = modules

    @property
    def modules(self) -> Mapping[str, Optional[ModuleType]]:
        return sys.modules if self._modules is None else self._modules

    def entry_identity(self) -> Optional[str]:
        return self._entry_identity

    @cached_property
    def _entry_identity(self) -> Optional[str]:
        # The entry module is fixed for the life of the process.
        name = self._entry_module or self._resolve_entry_module()
        if not name:
            return None
        return self.module_identity(name)

    def loaded_module_identities(self) -> List[Optional[str]]:
        identities: List[Optional[str]] = []
        for name, module in list(self.modules.items()):
            if "." in name or name == "__main__":
                continue
            identities.append(None if module is None else self._safe_identity(name))
        return identities

    def _safe_identity(self, name: str) -> Optional[str]:
        try:
            return self.module_identity(name)
        except Exception as exc:
            logger.warning(
                "health.introspect.module_skipped", module=name, error=str(exc)
            )
            return None

    def module_identity(self, name: str) -> str:
        module_version = self._distribution_version(name) or self._module_version(name)
        if module_version:
            return f"{name}, Version={module_version}"
        return name

    def _resolve_entry_module(self) -> Optional[str]:
        main = self.modules.get("__main__")
        if main is None:
            return None

        spec = getattr(main, "__spec__", None)
        if spec is not None and spec.name:
            return spec.name.partition(".")[0]

        main_file = getattr(main, "__file__", None)
        if main_file:
            return Path(main_file).stem
        return None

    @cached_property
    def _distributions(self) -> Mapping[str, List[str]]:
        return packages_distributions()

    def _distribution_version(self, name: str) -> Optional[str]:
        for distribution in self._distributions.get(name, ()):
            try:
                return version(distribution)
            except PackageNotFoundError:
                continue
        return None

    def _module_version(self, name: str) -> Optional[str]:
        module_version = getattr(self.modules.get(name), "__version__", None)
        return module_version if isinstance(module_version, str) else None
