"""
Module Registry - Single source of truth for the umbrella library's public surface.

Manages topic module registration, symbol ownership, collision detection
and manifest persistence.
"""

import json
import os
import shutil
import logging
from types import ModuleType
from typing import Dict, Iterable, List, Optional, Tuple
from datetime import datetime, timezone

from dsakit.models.registration import ModuleRegistration

logger = logging.getLogger(__name__)

UMBRELLA_OWNER = "<umbrella>"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


class TopicModuleError(ValueError):
    """Raised when a module cannot be registered as a topic module."""


class SymbolCollisionError(ValueError):
    """
    Raised when a topic module exports a name that is already published.

    Attributes:
        collisions: List of (symbol, existing_owner, new_owner) tuples
    """

    def __init__(self, collisions: List[Tuple[str, str, str]]):
        self.collisions = collisions
        details = "; ".join(
            f"'{symbol}' exported by '{new_owner}' is already exported by '{owner}'"
            for symbol, owner, new_owner in collisions
        )
        super().__init__(f"Symbol collision: {details}")


class ModuleRegistry:
    """
    Single source of truth for all published symbols.

    Guarantees:
    - Every published name has exactly one owning topic module
    - Reserved names (the umbrella's own attributes) are never shadowed
    - A failed registration leaves the registry unchanged
    """

    def __init__(self, reserved: Iterable[str] = ()):
        """
        Initialize an empty registry.

        Args:
            reserved: Names owned by the umbrella itself that topic modules may not export
        """
        self.registrations: Dict[str, ModuleRegistration] = {}  # topic name -> registration
        self.owners: Dict[str, str] = {}  # symbol -> topic name
        self.symbols: Dict[str, object] = {}  # symbol -> exported object
        self.reserved = set(reserved)
        self.version = "1.0.0"
        self.last_updated = _utc_timestamp()

    def register(self, name: str, module: ModuleType) -> ModuleRegistration:
        """
        Register a topic module and claim its exported names.

        Args:
            name: Topic identifier (e.g., "collections")
            module: Imported topic module; must define __all__

        Returns:
            The new ModuleRegistration

        Raises:
            TopicModuleError: If the name is invalid or taken, or the module's __all__ is missing or broken
            SymbolCollisionError: If any exported name is reserved or owned by another topic module
        """
        if not name.isidentifier():
            raise TopicModuleError(f"Invalid topic name: '{name}'")

        if name in self.registrations:
            raise TopicModuleError(
                f"Topic '{name}' is already registered from {self.registrations[name].module_path}"
            )

        exports = self._public_names(name, module)

        collisions = []
        for symbol in exports:
            if symbol in self.reserved:
                collisions.append((symbol, UMBRELLA_OWNER, name))
            elif symbol in self.owners:
                collisions.append((symbol, self.owners[symbol], name))

        if collisions:
            logger.error(f"Rejected topic '{name}': {len(collisions)} colliding symbol(s)")
            raise SymbolCollisionError(collisions)

        registration = ModuleRegistration(
            name=name,
            module_path=module.__name__,
            exports=exports,
            summary=self._summary(module),
            metadata={"registered_at": _utc_timestamp()}
        )

        self.registrations[name] = registration
        for symbol in exports:
            self.owners[symbol] = name
            self.symbols[symbol] = getattr(module, symbol)
        self.last_updated = registration.metadata["registered_at"]

        logger.info(f"Registered topic '{name}' ({module.__name__}): {len(exports)} symbols")
        return registration

    def get_registration(self, name: str) -> Optional[ModuleRegistration]:
        """Retrieve registration by topic name. Returns None if not found."""
        return self.registrations.get(name)

    def get_all_registrations(self) -> List[ModuleRegistration]:
        """Return all registrations in registration order."""
        return list(self.registrations.values())

    def find_owner(self, symbol: str) -> Optional[str]:
        """Return the topic name that exports symbol, or None."""
        return self.owners.get(symbol)

    def exports(self) -> Dict[str, object]:
        """Return published symbols mapped to their objects, in registration order."""
        return dict(self.symbols)

    def publish(self, namespace: dict) -> List[str]:
        """
        Copy every published symbol into namespace.

        Args:
            namespace: Target mapping, typically the umbrella's globals()

        Returns:
            Published names in registration order
        """
        namespace.update(self.symbols)
        logger.debug(f"Published {len(self.symbols)} symbols")
        return list(self.symbols)

    def removed_symbols(self, previous: List[ModuleRegistration]) -> Dict[str, List[str]]:
        """
        Compare against an earlier manifest.

        Args:
            previous: Registrations loaded from a manifest

        Returns:
            Topic name -> names published before but missing now (only non-empty entries)
        """
        removed = {}
        for registration in previous:
            missing = [
                symbol for symbol in registration.exports
                if self.owners.get(symbol) != registration.name
            ]
            if missing:
                removed[registration.name] = missing
        return removed

    def save_manifest(self, manifest_path: str) -> None:
        """
        Persist all registrations to disk with atomic write pattern.
        Creates backup before write.
        """
        if os.path.exists(manifest_path):
            backup_path = f"{manifest_path}.backup"
            shutil.copy(manifest_path, backup_path)
            logger.debug(f"Created backup: {backup_path}")

        data = {
            "version": self.version,
            "last_updated": self.last_updated,
            "modules": [r.to_dict() for r in self.registrations.values()]
        }

        directory = os.path.dirname(manifest_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        temp_path = f"{manifest_path}.tmp"
        try:
            with open(temp_path, 'w') as f:
                json.dump(data, f, indent=2)

            os.replace(temp_path, manifest_path)
            logger.info(f"Manifest saved: {len(self.registrations)} topic modules, {len(self.symbols)} symbols")

        except Exception as e:
            logger.error(f"Failed to save manifest: {e}")
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

    @staticmethod
    def load_manifest(manifest_path: str) -> List[ModuleRegistration]:
        """
        Load registrations from a manifest file.

        Falls back to the .backup copy when the manifest is unreadable.

        Raises:
            FileNotFoundError: If neither the manifest nor a backup exists
        """
        for path in (manifest_path, f"{manifest_path}.backup"):
            if not os.path.exists(path):
                continue
            try:
                with open(path, 'r') as f:
                    data = json.load(f)
                registrations = [ModuleRegistration.from_dict(m) for m in data.get("modules", [])]
            except json.JSONDecodeError as e:
                logger.error(f"Failed to parse manifest JSON at {path}: {e}")
                continue
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.error(f"Malformed manifest at {path}: {e!r}")
                continue

            logger.info(f"Loaded {len(registrations)} topic modules from {path}")
            return registrations

        raise FileNotFoundError(f"No readable manifest at {manifest_path}")

    @staticmethod
    def _public_names(name: str, module: ModuleType) -> List[str]:
        """Read and validate the module's __all__."""
        exports = getattr(module, "__all__", None)
        if exports is None:
            raise TopicModuleError(
                f"Topic '{name}' ({module.__name__}) must declare its public names in __all__"
            )

        exports = list(exports)
        seen = set()
        for symbol in exports:
            if symbol in seen:
                raise TopicModuleError(f"Topic '{name}' lists '{symbol}' twice in __all__")
            seen.add(symbol)
            if symbol.startswith("_"):
                raise TopicModuleError(
                    f"Topic '{name}' lists private name '{symbol}' in __all__"
                )
            if not hasattr(module, symbol):
                raise TopicModuleError(
                    f"Topic '{name}' lists '{symbol}' in __all__ but does not define it"
                )
        return exports

    @staticmethod
    def _summary(module: ModuleType) -> str:
        """First non-empty docstring line."""
        for line in (module.__doc__ or "").strip().splitlines():
            if line.strip():
                return line.strip()
        return ""
