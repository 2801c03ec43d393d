"""
Module Registry.

Single source of truth for the umbrella library's public surface.
Tracks topic module registrations, symbol ownership and the manifest.
"""

from dsakit.registry.module_registry import (
    ModuleRegistry,
    SymbolCollisionError,
    TopicModuleError,
)
