"""
Unit tests for ReportWriter.
"""

import json
import os
import tempfile
import types

import pandas as pd

from dsakit.registry import ModuleRegistry
from dsakit.utils.reporting import ReportWriter, SURFACE_COLUMNS, first_doc_line, symbol_kind


class Stack:
    """LIFO container.

    Longer description.
    """


def push(stack, item):
    """Push item onto stack."""


def make_registry():
    module = types.ModuleType("pkg.collections", "Collections topic.")
    module.Stack = Stack
    module.push = push
    module.LIMIT = 10
    module.__all__ = ["Stack", "push", "LIMIT"]

    registry = ModuleRegistry()
    registry.register("collections", module)
    return registry


def test_symbol_kind_and_summary():
    """Test classification and docstring summaries."""
    assert symbol_kind(Stack) == "class"
    assert symbol_kind(push) == "function"
    assert symbol_kind(json) == "module"
    assert symbol_kind(10) == "value"
    assert first_doc_line(Stack) == "LIFO container."


def test_surface_table():
    """Test one row per published symbol."""
    with tempfile.TemporaryDirectory() as tmpdir:
        writer = ReportWriter(tmpdir)
        df = writer.surface_table(make_registry())

    assert list(df.columns) == SURFACE_COLUMNS
    assert list(df["Symbol"]) == ["Stack", "push", "LIMIT"]
    assert list(df["Kind"]) == ["class", "function", "value"]
    assert set(df["Topic"]) == {"collections"}
    assert df.loc[df["Symbol"] == "push", "Summary"].item() == "Push item onto stack."


def test_empty_surface_table():
    """Test an empty registry gives an empty table with the right columns."""
    with tempfile.TemporaryDirectory() as tmpdir:
        df = ReportWriter(tmpdir).surface_table(ModuleRegistry())

    assert df.empty
    assert list(df.columns) == SURFACE_COLUMNS


def test_write_table_with_metadata():
    """Test CSV and metadata side file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        output_root = os.path.join(tmpdir, "reports")
        writer = ReportWriter(output_root)
        df = pd.DataFrame([{"Algorithm": "merge", "Size": 10, "Seconds": 0.5}])

        output_path = writer.write_table(df, "bench", metadata={"seed": 42})

        assert output_path == os.path.join(output_root, "bench.csv")
        assert pd.read_csv(output_path).to_dict("records") == df.to_dict("records")

        with open(os.path.join(output_root, "bench_metadata.json")) as f:
            metadata = json.load(f)

        assert metadata["seed"] == 42
        assert metadata["rows"] == 1
        assert metadata["columns"] == ["Algorithm", "Size", "Seconds"]
        assert metadata["generated_at"].endswith("Z")
