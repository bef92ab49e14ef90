"""
CLI command entry points for culinary_contacts.

These functions are registered as console scripts in pyproject.toml.
resolve-contacts delegates to the script in scripts/; contact-cache is
small enough to live here.
"""

import subprocess
import sys
from pathlib import Path


def _run_script(script_name: str):
    """
    Helper to run a script with arguments.

    Args:
        script_name: Name of script file (without .py extension)
    """
    script = Path(__file__).parent.parent.parent / "scripts" / f"{script_name}.py"
    # argv is passed as a list (no shell); argparse validates it
    completed = subprocess.run([sys.executable, str(script)] + sys.argv[1:], check=False)
    sys.exit(completed.returncode)


def run_resolve_contacts():
    """Entry point for resolve-contacts command."""
    _run_script("resolve_contacts")


def run_cache(argv: list[str] | None = None):
    """Entry point for contact-cache command."""
    import argparse

    from culinary_contacts.cache import build_cache

    parser = argparse.ArgumentParser(description="Inspect or clear the contact lookup cache")
    parser.add_argument("command", choices=["stats", "list", "clear"])
    parser.add_argument("--limit", type=int, default=20, help="Limit for list")
    parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")
    args = parser.parse_args(argv)

    cache = build_cache()
    cache.load()

    if args.command == "stats":
        stats = cache.stats()
        print(f"Cache: {stats['snapshot_dir']} (enabled: {stats['enabled']})")
        print(f"  Total entries: {stats['total']}")
        print(f"  Cached emails: {stats['emails']}")
        print(f"  TTL: {stats['ttl_days']} days")
        print("  By source:")
        for source, count in sorted(stats["by_source"].items()):
            print(f"    {source}: {count}")

    elif args.command == "list":
        entries = sorted(cache.entries(), key=lambda e: e.timestamp, reverse=True)
        print(f"Entries (newest first, limit {args.limit}):")
        for entry in entries[: args.limit]:
            print(f"  {entry.key}  {len(entry.emails)} emails  {entry.timestamp:%Y-%m-%d}")

    elif args.command == "clear":
        if not args.yes:
            confirm = input(f"Clear all {len(cache)} cache entries? [y/N] ")
            if confirm.lower() != "y":
                print("Aborted")
                return
        count = cache.clear(persist=True)
        print(f"Cleared {count} entries")
