"""
Reporting utility.

Writes pandas tables as CSV with a `<name>_metadata.json` side file.
Used for the public-surface table and for benchmark results.
"""

import inspect
import json
import os
import logging
from datetime import datetime, timezone
from typing import Dict, Optional

import pandas as pd

from dsakit.registry.module_registry import ModuleRegistry

logger = logging.getLogger(__name__)

SURFACE_COLUMNS = ["Topic", "Module", "Symbol", "Kind", "Summary"]


def symbol_kind(obj: object) -> str:
    """Classify an exported object as module, class, function or value."""
    if inspect.ismodule(obj):
        return "module"
    if inspect.isclass(obj):
        return "class"
    if inspect.isroutine(obj):
        return "function"
    return "value"


def first_doc_line(obj: object) -> str:
    """First non-empty line of the object's docstring, or ''."""
    doc = inspect.getdoc(obj) or ""
    for line in doc.splitlines():
        if line.strip():
            return line.strip()
    return ""


class ReportWriter:
    """
    Writes report tables under one output directory.

    Each table becomes <output_root>/<name>.csv plus
    <output_root>/<name>_metadata.json.
    """

    def __init__(self, output_root: str):
        """
        Initialize report writer.

        Args:
            output_root: Directory for CSV and metadata files
        """
        self.output_root = str(output_root)
        os.makedirs(self.output_root, exist_ok=True)
        logger.info(f"Initialized ReportWriter with output_root={self.output_root}")

    def surface_table(self, registry: ModuleRegistry) -> pd.DataFrame:
        """
        Tabulate every published symbol.

        Args:
            registry: Registry holding the topic module registrations

        Returns:
            DataFrame with columns Topic, Module, Symbol, Kind, Summary,
            in registration order
        """
        symbols = registry.exports()
        rows = []
        for registration in registry.get_all_registrations():
            for symbol in registration.exports:
                obj = symbols[symbol]
                rows.append({
                    'Topic': registration.name,
                    'Module': registration.module_path,
                    'Symbol': symbol,
                    'Kind': symbol_kind(obj),
                    'Summary': first_doc_line(obj)
                })

        if not rows:
            logger.warning("No topic modules registered, creating empty surface table")
            return pd.DataFrame(columns=SURFACE_COLUMNS)

        return pd.DataFrame(rows, columns=SURFACE_COLUMNS)

    def write_table(self, df: pd.DataFrame, name: str, metadata: Optional[Dict] = None) -> str:
        """
        Save df as CSV and its metadata as JSON.

        Args:
            df: Table to write
            name: Base file name without extension
            metadata: Extra JSON-serializable fields for the metadata file

        Returns:
            Path of the CSV file
        """
        output_path = os.path.join(self.output_root, f"{name}.csv")
        df.to_csv(output_path, index=False)
        logger.info(f"Table saved to {output_path} ({len(df)} rows)")

        metadata_path = os.path.join(self.output_root, f"{name}_metadata.json")
        payload = dict(metadata or {})
        payload.update({
            "table": name,
            "rows": len(df),
            "columns": [str(c) for c in df.columns],
            "generated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        })

        with open(metadata_path, 'w') as f:
            json.dump(payload, f, indent=2)

        logger.info(f"Metadata saved to {metadata_path}")
        return output_path
