"""Cache consistency checks."""

from app.repositories.common import CachedProblemSetRepository
from app.repositories.problems import ProblemSetRepository


def validate_cache(ledger_repo: CachedProblemSetRepository, problem_repo: ProblemSetRepository) -> dict:
    """Compare ledger records with stored partitions."""
    issues = []
    records = ledger_repo.list_all()
    stored = problem_repo.counts()

    for record in records:
        if record.partition_key not in stored:
            issues.append(f"{record.partition_key}: ledger record without stored partition")
            continue
        actual = stored[record.partition_key]
        if actual != record.problem_count:
            issues.append(f"{record.partition_key}: ledger says {record.problem_count} problems, store has {actual}")

    # Partitions written without a ledger record are refetched on next access
    recorded = {r.partition_key for r in records}
    orphans = sorted(k for k in stored if k not in recorded)

    stats = {
        "partitions": len(stored),
        "records": len(records),
        "problems": sum(stored.values()),
        "orphans": len(orphans),
    }

    return {
        "valid": len(issues) == 0,
        "issues": issues,
        "orphans": orphans,
        "stats": stats,
    }
