"""Registry of the modules allowed to raise notifications."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.domain.entities import Module

logger = logging.getLogger(__name__)


class ModuleManifestEntry(BaseModel):
    """One module declared in the JSON manifest."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    root: str | None = None
    menu_icon: str | None = Field(default="view_module", alias="menuIcon")
    menu_text: str | None = Field(default=None, alias="menuText")


_MANIFEST_ADAPTER = TypeAdapter(list[ModuleManifestEntry])


class ModuleRegistry:
    """Enumerable set of :class:`Module` keyed by name."""

    def __init__(self, modules: Iterable[Module] = ()) -> None:
        self._modules: dict[str, Module] = {}
        for module in modules:
            self.register(module)

    def register(self, module: Module) -> None:
        if module.name in self._modules:
            logger.warning("Module '%s' registered twice; keeping the last one", module.name)
        self._modules[module.name] = module

    def __iter__(self) -> Iterator[Module]:
        return iter(self._modules.values())

    def __len__(self) -> int:
        return len(self._modules)

    def get(self, name: str) -> Module | None:
        return self._modules.get(name)

    def find_by_path(self, path: str | os.PathLike[str]) -> Module | None:
        """Return the module whose root directory contains ``path``.

        When roots are nested the deepest one wins.
        """

        target = Path(path).resolve()
        best: Module | None = None
        best_depth = -1
        for module in self._modules.values():
            root = Path(module.root).resolve()
            if target != root and root not in target.parents:
                continue
            depth = len(root.parts)
            if depth > best_depth:
                best, best_depth = module, depth
        return best

    def resolve(self, caller: str | os.PathLike[str] | None) -> Module | None:
        """Map a caller identity to a registered module.

        ``caller`` is either a module name or a file path inside a module
        root, typically the caller's ``__file__``.
        """

        if caller is None:
            return None
        if isinstance(caller, str):
            module = self.get(caller)
            if module is not None:
                return module
            if os.sep not in caller and "/" not in caller:
                return None
        return self.find_by_path(caller)

    @classmethod
    def from_manifest(cls, path: str | os.PathLike[str]) -> "ModuleRegistry":
        """Load modules from a JSON list of ``{name, root, menuIcon, menuText}``.

        Relative roots are resolved against the manifest directory.
        """

        manifest_path = Path(path)
        with manifest_path.open(encoding="utf-8") as handle:
            raw_entries = json.load(handle)
        try:
            entries = _MANIFEST_ADAPTER.validate_python(raw_entries)
        except PydanticValidationError as exc:
            raise ValueError(f"Invalid module manifest {manifest_path}: {exc}") from exc

        modules = []
        for entry in entries:
            root = Path(entry.root or entry.name)
            if not root.is_absolute():
                root = manifest_path.parent / root
            modules.append(
                Module(
                    name=entry.name,
                    root=str(root),
                    menu_icon=entry.menu_icon or "view_module",
                    menu_text=entry.menu_text or entry.name,
                )
            )
        logger.info("Loaded %d modules from %s", len(modules), manifest_path)
        return cls(modules)


__all__ = ["ModuleManifestEntry", "ModuleRegistry"]
