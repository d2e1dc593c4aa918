"""
Investor-to-company reconciliation engine.

Pure matching code: no database access happens in this package.
"""

from app.services.reconciliation.candidate_index import CandidateIndex
from app.services.reconciliation.matcher import DEFAULT_TUNING, MatchTuning, match_investor
from app.services.reconciliation.normalizer import exact_key, normalize_company_name
from app.services.reconciliation.report import build_preview, build_updates, chunk_updates

__all__ = [
    "CandidateIndex",
    "DEFAULT_TUNING",
    "MatchTuning",
    "match_investor",
    "exact_key",
    "normalize_company_name",
    "build_preview",
    "build_updates",
    "chunk_updates",
]
