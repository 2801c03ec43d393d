"""
dsakit - maintenance CLI

Reports the umbrella library's public surface and audits its documentation.
"""

import argparse
import logging
import sys

import dsakit
from dsakit.registry import ModuleRegistry
from dsakit.utils.doc_audit import audit_registry, find_executable_code
from dsakit.utils.reporting import ReportWriter
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def run_surface(args) -> int:
    """Write the public-surface table and manifest; compare with an older manifest."""
    logger = logging.getLogger(__name__)
    registry = dsakit.module_registry

    writer = ReportWriter(args.output_root)
    df = writer.surface_table(registry)
    output_path = writer.write_table(
        df,
        settings.SURFACE_REPORT_NAME,
        metadata={
            "version": dsakit.__version__,
            "topics": [r.name for r in registry.get_all_registrations()]
        }
    )

    removed = {}
    if args.check_manifest:
        previous = ModuleRegistry.load_manifest(args.check_manifest)
        removed = registry.removed_symbols(previous)
        for topic, symbols in removed.items():
            logger.error(f"Topic '{topic}' no longer publishes: {', '.join(symbols)}")

    registry.save_manifest(args.manifest_path)

    print(f"Topics: {len(registry.get_all_registrations())}")
    print(f"Symbols: {len(df)}")
    print(f"Surface table: {output_path}")
    print(f"Manifest: {args.manifest_path}")

    if removed:
        print(f"❌ {sum(len(s) for s in removed.values())} previously published symbol(s) removed")
        return 1
    return 0


def run_audit(args) -> int:
    """Check docstrings of every public item and the package layout."""
    issues = audit_registry(dsakit.module_registry)
    for issue in issues:
        print(f"[{issue.topic}] {issue.item}: {issue.problem}")

    entry_points = find_executable_code(args.package_dir)
    for path in entry_points:
        print(f"[layout] {path}: executable code inside the library package")

    if issues or entry_points:
        print(f"\n❌ Audit failed: {len(issues)} documentation issue(s), {len(entry_points)} layout issue(s)")
        return 1

    print("✅ Audit passed")
    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="dsakit - maintenance tooling for the umbrella library",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write the public-surface table and manifest
  python main.py surface

  # Fail if a symbol published in an older manifest disappeared
  python main.py surface --check-manifest output/manifest.json.backup

  # Check docstrings and package layout
  python main.py audit
        """
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    surface = subparsers.add_parser("surface", help="Report the public surface")
    surface.add_argument(
        "--output-root",
        default=str(settings.OUTPUT_ROOT),
        help=f"Report directory (default: {settings.OUTPUT_ROOT})"
    )
    surface.add_argument(
        "--manifest-path",
        default=str(settings.MANIFEST_PATH),
        help=f"Manifest to write (default: {settings.MANIFEST_PATH})"
    )
    surface.add_argument(
        "--check-manifest",
        help="Older manifest; exit 1 if any of its symbols is no longer published"
    )
    surface.set_defaults(handler=run_surface)

    audit = subparsers.add_parser("audit", help="Audit documentation and layout")
    audit.add_argument(
        "--package-dir",
        default=str(settings.PACKAGE_ROOT),
        help=f"Package tree to scan for entry points (default: {settings.PACKAGE_ROOT})"
    )
    audit.set_defaults(handler=run_audit)

    args = parser.parse_args()

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        logger.info(f"Running '{args.command}'")
        exit_code = args.handler(args)
        logger.info(f"'{args.command}' finished with exit code {exit_code}")
        sys.exit(exit_code)

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print("\n⚠️  Interrupted")
        sys.exit(1)

    except Exception as e:
        logger.error(f"'{args.command}' failed: {e}", exc_info=True)
        print(f"\n❌ '{args.command}' failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
