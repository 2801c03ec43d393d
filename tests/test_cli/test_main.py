"""
Tests for the maintenance CLI.

Logging setup is patched out so no log file is written.
"""

import pytest
import json
import os
import tempfile
from unittest.mock import patch

import main


def run_cli(*argv):
    """Run main() with argv and return its exit code."""
    with patch('main.setup_logging'), patch('sys.argv', ["main.py", *argv]):
        with pytest.raises(SystemExit) as excinfo:
            main.main()
    return excinfo.value.code


def test_surface_writes_reports():
    """Test surface writes the table, metadata and manifest."""
    with tempfile.TemporaryDirectory() as tmpdir:
        manifest_path = os.path.join(tmpdir, "manifest.json")

        code = run_cli("surface", "--output-root", tmpdir, "--manifest-path", manifest_path)

        assert code == 0
        assert os.path.exists(os.path.join(tmpdir, "public_surface.csv"))
        assert os.path.exists(os.path.join(tmpdir, "public_surface_metadata.json"))

        with open(manifest_path) as f:
            names = [m["name"] for m in json.load(f)["modules"]]
        assert names == ["collections", "algorithms"]


def test_surface_detects_removed_symbols():
    """Test --check-manifest fails when a symbol disappeared."""
    with tempfile.TemporaryDirectory() as tmpdir:
        old_manifest = os.path.join(tmpdir, "old.json")
        with open(old_manifest, 'w') as f:
            json.dump({
                "version": "1.0.0",
                "last_updated": "2024-06-01T00:00:00Z",
                "modules": [{
                    "name": "collections",
                    "module_path": "dsakit.collections",
                    "exports": ["MinHeap", "Stack"]
                }]
            }, f)

        code = run_cli(
            "surface",
            "--output-root", tmpdir,
            "--manifest-path", os.path.join(tmpdir, "manifest.json"),
            "--check-manifest", old_manifest
        )

        assert code == 1


def test_audit_passes():
    """Test the library passes its own audit."""
    assert run_cli("audit") == 0


def test_audit_fails_on_entry_point():
    """Test audit reports a package tree containing __main__.py."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with open(os.path.join(tmpdir, "__main__.py"), 'w') as f:
            f.write("print('hi')\n")

        assert run_cli("audit", "--package-dir", tmpdir) == 1
