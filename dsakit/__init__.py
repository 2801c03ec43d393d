"""
dsakit - data structures and algorithms in one import.

The umbrella package re-exports the public names of every topic module:

    >>> import dsakit
    >>> dsakit.MinHeap is dsakit.collections.MinHeap
    True

Topic modules are registered explicitly in TOPIC_MODULES. Two topic
modules exporting the same name make `import dsakit` fail with
SymbolCollisionError.
"""

from dsakit import algorithms, collections
from dsakit.registry import ModuleRegistry, SymbolCollisionError, TopicModuleError

__version__ = "0.1.0"

TOPIC_MODULES = (
    ("collections", collections),
    ("algorithms", algorithms),
)

_UMBRELLA_NAMES = [
    "collections",
    "algorithms",
    "ModuleRegistry",
    "SymbolCollisionError",
    "TopicModuleError",
    "TOPIC_MODULES",
    "module_registry",
]

# Everything already bound here (subpackages, dunders) plus utils, which is imported lazily
module_registry = ModuleRegistry(reserved=list(globals()) + _UMBRELLA_NAMES + ["utils"])
for _name, _module in TOPIC_MODULES:
    module_registry.register(_name, _module)

__all__ = _UMBRELLA_NAMES + module_registry.publish(globals())
