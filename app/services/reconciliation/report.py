"""Preview aggregation and helpers that turn a reviewed preview into updates."""

from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from app.schemas.investor_reconciliation import (
    MatchedResult,
    ReconciliationPreview,
    UpdateRequest,
)
from app.services.reconciliation.candidate_index import CandidateIndex
from app.services.reconciliation.matcher import DEFAULT_TUNING, MatchTuning, match_investor


def build_preview(
    investors: Iterable,
    index: CandidateIndex,
    tuning: MatchTuning = DEFAULT_TUNING,
) -> ReconciliationPreview:
    """Run the matcher over every investor and count results by status."""
    counts = {"already_set": 0, "matched": 0, "not_found": 0, "ambiguous": 0}
    results = []
    for investor in investors:
        result = match_investor(investor, index, tuning)
        counts[result.status] += 1
        results.append(result)

    return ReconciliationPreview(total=len(results), results=results, **counts)


def build_updates(
    preview: ReconciliationPreview,
    manual_selections: Optional[Mapping[str, str]] = None,
) -> List[UpdateRequest]:
    """
    Updates for every matched result plus every manual selection.

    ``manual_selections`` maps investor_id -> company_id and wins over the
    computed match for the same investor. Investors already linked are never
    included.
    """
    manual: Dict[str, str] = dict(manual_selections or {})
    updates: List[UpdateRequest] = []

    for result in preview.results:
        if result.status == "already_set":
            continue
        selected = manual.get(result.investor_id)
        if selected:
            updates.append(
                UpdateRequest(investor_id=result.investor_id, company_id=selected, match_type="manual")
            )
        elif isinstance(result, MatchedResult):
            updates.append(
                UpdateRequest(
                    investor_id=result.investor_id,
                    company_id=result.matched_company_id,
                    match_type=result.match_type,
                )
            )
    return updates


def chunk_updates(updates: List[UpdateRequest], size: int) -> Iterator[List[UpdateRequest]]:
    """Split updates into apply batches of at most ``size`` rows."""
    if size <= 0:
        raise ValueError("size must be positive")
    for start in range(0, len(updates), size):
        yield updates[start:start + size]
