"""Domain travel batch analytics — pure functions, zero external dependencies.

Only stdlib and domain.models imports allowed.
"""

from collections import Counter

from domain.models import BatchStats, BatchStatus


def batch_stats(batches):
    """Compute home-page counters from TravelBatch objects (any iterable).

    Statuses may be BatchStatus members or their raw values.
    """
    batches = list(batches)
    statuses = [BatchStatus(b.status) for b in batches]
    by_status = Counter(statuses)
    active = {
        t.id
        for b, status in zip(batches, statuses)
        if status is not BatchStatus.COMPLETED
        for t in b.travelers
    }
    return BatchStats(
        total=len(batches),
        planning=by_status[BatchStatus.PLANNING],
        confirmed=by_status[BatchStatus.CONFIRMED],
        in_progress=by_status[BatchStatus.IN_PROGRESS],
        completed=by_status[BatchStatus.COMPLETED],
        total_budget=sum(b.budget for b in batches),
        active_travelers=len(active),
    )


def traveler_initials(name):
    """Avatar fallback: first letter of each word ("Marie Dubois" -> "MD")."""
    return "".join(part[0] for part in name.split())


def batches_by_traveler(batches):
    """Map traveler id -> batches they are part of, in input order."""
    result = {}
    for batch in batches:
        for traveler in batch.travelers:
            result.setdefault(traveler.id, []).append(batch)
    return result
