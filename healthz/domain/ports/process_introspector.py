"""Domain port for self-introspection of the running process."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol


class IProcessIntrospector(Protocol):
    """Describes the running process and the modules it has loaded."""

    def entry_identity(self) -> Optional[str]:
        """Full identity of the entry module, ``None`` when undeterminable."""
        ...

    def loaded_module_identities(self) -> Iterable[Optional[str]]:
        """Identity of every loaded module, ``None`` for undeterminable ones."""
        ...
