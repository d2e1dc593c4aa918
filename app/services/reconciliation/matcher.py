"""
Tiered resolution of an investor's client_name to a catalog company.

Tiers, first hit wins:
    1. already_set        client_company_id is present
    2. exact (raw)        lower(trim(client_name)) in exact_map
    3. exact (normalized) normalized key names exactly one company
    4. normalized unique  fuzzy_map group of size 1
    5. normalized ambiguous  fuzzy_map group of size >= 2
    6. scored partial     containment / prefix / word-overlap scoring
    7. not_found
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from app.schemas.investor_reconciliation import (
    AlreadySetResult,
    AmbiguousResult,
    CompanyCandidate,
    MatchedResult,
    MatchResult,
    NotFoundResult,
)
from app.services.reconciliation.candidate_index import CandidateIndex
from app.services.reconciliation.normalizer import normalize_company_name


@dataclass(frozen=True)
class MatchTuning:
    """Heuristic constants of the scored tier."""

    exact_score: float = 100.0
    containment_weight: float = 85.0
    prefix_weight: float = 75.0
    word_overlap_weight: float = 65.0
    score_floor: float = 50.0
    auto_resolve_floor: float = 70.0
    auto_resolve_gap: float = 15.0
    # scored tier runs only for keys longer than this
    min_partial_key_length: int = 3
    # words of this length or shorter are ignored by word overlap
    min_word_length: int = 2


DEFAULT_TUNING = MatchTuning()


def _base_fields(investor) -> dict:
    return {
        "investor_id": str(investor.id),
        "investor_name": investor.full_name or "N/A",
        "client_name": investor.client_name or "",
    }


def _matched(investor, company: CompanyCandidate, match_type: str) -> MatchedResult:
    return MatchedResult(
        **_base_fields(investor),
        match_type=match_type,
        matched_company_id=company.id,
        matched_company_name=company.name,
    )


def _word_overlap_score(investor_key: str, company_key: str, tuning: MatchTuning) -> float:
    investor_words = [w for w in investor_key.split() if len(w) > tuning.min_word_length]
    company_words = [w for w in company_key.split() if len(w) > tuning.min_word_length]
    if not investor_words or not company_words:
        return 0.0

    matching = [
        iw for iw in investor_words
        if any(cw in iw or iw in cw for cw in company_words)
    ]
    if not matching:
        return 0.0
    return len(matching) / max(len(investor_words), len(company_words)) * tuning.word_overlap_weight


def score_company_key(investor_key: str, company_key: str, tuning: MatchTuning = DEFAULT_TUNING) -> float:
    """Confidence in [0, 100] that company_key names the same company as investor_key."""
    if not investor_key or not company_key:
        return 0.0
    if company_key == investor_key:
        return tuning.exact_score
    if investor_key in company_key:
        return len(investor_key) / len(company_key) * tuning.containment_weight
    if company_key in investor_key:
        return len(company_key) / len(investor_key) * tuning.containment_weight
    # unreachable: a prefix is also a substring and scores as containment above
    if company_key.startswith(investor_key) or investor_key.startswith(company_key):
        shorter, longer = sorted((len(company_key), len(investor_key)))
        return shorter / longer * tuning.prefix_weight
    return _word_overlap_score(investor_key, company_key, tuning)


def rank_partial_candidates(
    investor_key: str,
    index: CandidateIndex,
    tuning: MatchTuning = DEFAULT_TUNING,
) -> List[Tuple[CompanyCandidate, float]]:
    """Companies scoring at least the floor, best first, one entry per company id."""
    best: Dict[str, Tuple[CompanyCandidate, float]] = {}
    for company_key, companies in index.fuzzy_map.items():
        score = score_company_key(investor_key, company_key, tuning)
        if score < tuning.score_floor:
            continue
        for company in companies:
            seen = best.get(company.id)
            if seen is None or score > seen[1]:
                best[company.id] = (company, score)

    return sorted(best.values(), key=lambda item: item[1], reverse=True)


def resolve_ranked_candidates(
    investor,
    ranked: List[Tuple[CompanyCandidate, float]],
    tuning: MatchTuning,
) -> Optional[MatchResult]:
    if not ranked:
        return None
    if len(ranked) == 1:
        return _matched(investor, ranked[0][0], "normalized")

    (top, top_score), (_, runner_up_score) = ranked[0], ranked[1]
    if top_score >= tuning.auto_resolve_floor and top_score > runner_up_score + tuning.auto_resolve_gap:
        return _matched(investor, top, "normalized")

    return AmbiguousResult(
        **_base_fields(investor),
        candidates=[company for company, _ in ranked],
    )


def match_investor(investor, index: CandidateIndex, tuning: MatchTuning = DEFAULT_TUNING) -> MatchResult:
    """
    Classify one investor against the candidate index.

    ``investor`` needs ``id``, ``full_name``, ``client_name`` and
    ``client_company_id`` attributes.
    """
    if investor.client_company_id:
        return AlreadySetResult(**_base_fields(investor))

    client_name = investor.client_name or ""

    exact = index.lookup_exact(client_name)
    if exact is not None:
        return _matched(investor, exact, "exact")

    norm_key = normalize_company_name(client_name)
    group = index.lookup_normalized(norm_key)

    # a normalized key shared by several companies must not resolve to the first one
    exact_normalized = index.exact_normalized_map.get(norm_key) if norm_key else None
    if exact_normalized is not None and len(group) <= 1:
        return _matched(investor, exact_normalized, "exact")

    if len(group) == 1:
        return _matched(investor, group[0], "normalized")

    if len(group) > 1:
        return AmbiguousResult(**_base_fields(investor), candidates=list(group))

    if len(norm_key) > tuning.min_partial_key_length:
        scored = resolve_ranked_candidates(investor, rank_partial_candidates(norm_key, index, tuning), tuning)
        if scored is not None:
            return scored

    return NotFoundResult(**_base_fields(investor))
