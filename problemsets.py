#!/usr/bin/env python3
"""
Look up company interview problem sets through the local cache.

Usage:
    python problemsets.py Microsoft                      # Auto-select time range
    python problemsets.py Google "3 months"              # Explicit time range
    python problemsets.py Amazon --invalidate "30 days"  # Drop one cached partition
    python problemsets.py --status                       # List cached problem sets
    python problemsets.py --validate                     # Check ledger/store consistency
    python problemsets.py Meta --live                    # Use the HTTP API instead of the mock
"""

import asyncio
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from loguru import logger

from app.container import container
from app.errors import ProblemSetError
from app.models.problems import TimeRange
from app.services.problems import validate_cache
from settings.logging import setup_logging


def run_validation() -> bool:
    """Print a ledger/store consistency report."""
    result = validate_cache(container.ledger_repo, container.problem_repo)
    stats = result["stats"]

    print("\n" + "=" * 60)
    print("CACHE VALIDATION REPORT")
    print("=" * 60)
    print(f"  Partitions: {stats['partitions']:,}")
    print(f"  Ledger records: {stats['records']:,}")
    print(f"  Problems: {stats['problems']:,}")
    print(f"  Orphaned partitions: {stats['orphans']}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("=" * 60)
    print("✅ Cache consistent!" if result["valid"] else "❌ Inconsistent entries found. Invalidate them to refetch.")
    print("=" * 60 + "\n")
    return result["valid"]


def show_status() -> None:
    """Print every cached problem set with its freshness."""
    cached = container.problem_sets.cached_sets()
    if not cached:
        print("\nNo cached problem sets.\n")
        return

    for record, fresh in cached:
        status = "fresh" if fresh else "stale"
        print(
            f"{record.partition_key:<40} {record.problem_count:>4} problems  "
            f"updated {record.last_updated:%Y-%m-%d %H:%M}  [{status}]"
        )


async def lookup(company: str, range_text: str | None) -> None:
    """Resolve and print one company's problem set."""
    time_range = TimeRange.parse(range_text) if range_text else None
    problems = await container.problem_sets.resolve(company, time_range, explicit=time_range is not None)

    print(f"\n{company}: {len(problems)} problems\n")
    for p in problems:
        frequency = p.frequency if p.frequency is not None else 0.0
        print(f"{p.number:>5}. {p.name:<50} {p.difficulty.label:<5} {p.acceptance_rate:6.1%}  freq {frequency:.2f}")
    print()


async def run(args: list[str]) -> int:
    """Dispatch one command and release the container afterwards. Returns the exit code."""
    try:
        if "--validate" in args:
            return 0 if run_validation() else 1

        if "--status" in args:
            show_status()
            return 0

        invalidate = "--invalidate" in args
        args = [a for a in args if a not in ("--live", "--invalidate")]
        company = args[0]
        range_text = args[1] if len(args) > 1 else None

        if invalidate:
            time_range = TimeRange.parse(range_text)
            removed = container.problem_sets.invalidate(company, time_range)
            logger.info("{} {} ({})", "Invalidated" if removed else "Nothing cached for", company, time_range.label)
            return 0

        await lookup(company, range_text)
        return 0
    except ProblemSetError as e:
        logger.error("Lookup failed: {}", e.message)
        return 1
    finally:
        await container.close()


def main():
    args = sys.argv[1:]
    commands = [a for a in args if not a.startswith("--")]
    if not commands and "--validate" not in args and "--status" not in args:
        print(__doc__)
        sys.exit(1)

    setup_logging(to_file=True)
    container.init(live="--live" in args)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
