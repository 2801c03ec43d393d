"""
Module registration data model.

Represents one topic module as seen by the umbrella library:
its identifier, import path and the symbols it publishes.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ModuleRegistration:
    """
    A topic module registered with the umbrella library.
    Exported names are unique across all registrations.
    """
    name: str  # Topic identifier (e.g., "collections")
    module_path: str  # Dotted import path (e.g., "dsakit.collections")
    exports: List[str] = field(default_factory=list)  # Public names, in __all__ order
    summary: str = ""  # First line of the module docstring
    metadata: dict = field(default_factory=dict)

    def __post_init__(self):
        if not self.name.isidentifier():
            raise ValueError(f"Invalid topic name: '{self.name}'. Must be a Python identifier")

    @classmethod
    def from_dict(cls, data: dict) -> "ModuleRegistration":
        """Create ModuleRegistration from JSON dict."""
        return cls(
            name=data["name"],
            module_path=data["module_path"],
            exports=data.get("exports", []),
            summary=data.get("summary", ""),
            metadata=data.get("metadata", {})
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.name,
            "module_path": self.module_path,
            "exports": self.exports,
            "summary": self.summary,
            "metadata": self.metadata
        }
