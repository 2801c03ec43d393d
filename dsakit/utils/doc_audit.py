"""
Documentation and layout audit.

Every topic module, and every public function, class, public method and
property it exports, must carry a non-empty docstring. Exported
submodules are audited through their own __all__. The package tree must
not contain executable entry points: those belong in main.py, benches/
and tests/.
"""

import ast
import importlib
import inspect
import os
import logging
from dataclasses import dataclass
from types import ModuleType
from typing import List, Optional, Set

from dsakit.registry.module_registry import ModuleRegistry

logger = logging.getLogger(__name__)


@dataclass
class DocumentationIssue:
    """A public item without documentation."""
    topic: str  # Topic the item was reached from
    item: str  # Dotted path of the item (e.g., "dsakit.collections.MinHeap.push")
    problem: str

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {"topic": self.topic, "item": self.item, "problem": self.problem}


def _has_doc(obj: object) -> bool:
    return bool((getattr(obj, "__doc__", None) or "").strip())


def _member_doc_target(member: object) -> Optional[object]:
    """Object whose __doc__ documents a class member, or None for plain attributes."""
    if isinstance(member, property):
        return member.fget
    if isinstance(member, (classmethod, staticmethod)):
        return member.__func__
    if inspect.isfunction(member):
        return member
    return None


def _audit_class(topic: str, path: str, cls: type) -> List[DocumentationIssue]:
    issues = []
    if not _has_doc(cls):
        issues.append(DocumentationIssue(topic, path, "class has no docstring"))

    for attr, member in vars(cls).items():
        if attr.startswith("_"):
            continue
        target = _member_doc_target(member)
        if target is None:
            continue
        kind = "property" if isinstance(member, property) else "method"
        if not _has_doc(target):
            issues.append(DocumentationIssue(topic, f"{path}.{attr}", f"{kind} has no docstring"))
    return issues


def _audit_module(topic: str, module: ModuleType, seen: Set[str]) -> List[DocumentationIssue]:
    seen.add(module.__name__)
    issues = []

    if not _has_doc(module):
        issues.append(DocumentationIssue(topic, module.__name__, "module has no docstring"))

    exports = getattr(module, "__all__", None)
    if exports is None:
        issues.append(DocumentationIssue(topic, module.__name__, "module has no __all__"))
        return issues

    for symbol in exports:
        path = f"{module.__name__}.{symbol}"
        obj = getattr(module, symbol, None)
        if obj is None:
            issues.append(DocumentationIssue(topic, path, "listed in __all__ but not defined"))
        elif inspect.ismodule(obj):
            if obj.__name__ not in seen:
                issues.extend(_audit_module(topic, obj, seen))
        elif inspect.isclass(obj):
            issues.extend(_audit_class(topic, path, obj))
        elif inspect.isroutine(obj) and not _has_doc(obj):
            issues.append(DocumentationIssue(topic, path, "function has no docstring"))
    return issues


def audit_topic_module(name: str, module: ModuleType) -> List[DocumentationIssue]:
    """
    Check documentation of one topic module.

    Args:
        name: Topic identifier used in the reported issues
        module: Imported topic module

    Returns:
        Issues found, in __all__ order (empty when fully documented)
    """
    issues = _audit_module(name, module, set())
    if issues:
        logger.warning(f"Topic '{name}': {len(issues)} documentation issue(s)")
    else:
        logger.debug(f"Topic '{name}' is fully documented")
    return issues


def audit_registry(registry: ModuleRegistry) -> List[DocumentationIssue]:
    """Audit every registered topic module, importing it by its module path."""
    issues = []
    for registration in registry.get_all_registrations():
        module = importlib.import_module(registration.module_path)
        issues.extend(audit_topic_module(registration.name, module))
    return issues


def _has_main_guard(tree: ast.Module) -> bool:
    for node in tree.body:
        if not isinstance(node, ast.If):
            continue
        test = node.test
        if (
            isinstance(test, ast.Compare)
            and isinstance(test.left, ast.Name)
            and test.left.id == "__name__"
            and any(
                isinstance(c, ast.Constant) and c.value == "__main__"
                for c in test.comparators
            )
        ):
            return True
    return False


def find_executable_code(package_dir: str) -> List[str]:
    """
    Find entry points inside a package tree.

    Args:
        package_dir: Root directory of the package (e.g., path to dsakit/)

    Returns:
        Sorted paths of __main__.py files and of modules with an
        `if __name__ == "__main__":` block
    """
    found = []
    for root, dirs, files in os.walk(package_dir):
        dirs[:] = [d for d in dirs if d != "__pycache__"]
        for filename in files:
            if not filename.endswith(".py"):
                continue
            path = os.path.join(root, filename)
            if filename == "__main__.py":
                found.append(path)
                continue
            with open(path, 'r', encoding="utf-8") as f:
                tree = ast.parse(f.read(), filename=path)
            if _has_main_guard(tree):
                found.append(path)

    if found:
        logger.warning(f"Executable code inside {package_dir}: {found}")
    return sorted(found)
