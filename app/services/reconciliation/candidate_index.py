"""Lookup structures built from the company catalog."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from app.schemas.investor_reconciliation import CompanyCandidate
from app.services.reconciliation.normalizer import exact_key, normalize_company_name


@dataclass(frozen=True)
class CandidateIndex:
    """
    Request-scoped index over the whole company catalog.

    exact_map and exact_normalized_map keep the first company seen for a key;
    fuzzy_map groups every company sharing a normalized key, in catalog order.
    """

    exact_map: Dict[str, CompanyCandidate] = field(default_factory=dict)
    exact_normalized_map: Dict[str, CompanyCandidate] = field(default_factory=dict)
    fuzzy_map: Dict[str, List[CompanyCandidate]] = field(default_factory=dict)

    @classmethod
    def build(cls, companies: Iterable) -> "CandidateIndex":
        """Build from rows exposing ``id`` and ``name`` (ORM rows, tuples from select())."""
        exact_map: Dict[str, CompanyCandidate] = {}
        exact_normalized_map: Dict[str, CompanyCandidate] = {}
        fuzzy_map: Dict[str, List[CompanyCandidate]] = {}

        for row in companies:
            candidate = CompanyCandidate(id=str(row.id), name=row.name or "")

            raw_key = exact_key(candidate.name)
            if raw_key and raw_key not in exact_map:
                exact_map[raw_key] = candidate

            norm_key = normalize_company_name(candidate.name)
            if norm_key:
                exact_normalized_map.setdefault(norm_key, candidate)
                fuzzy_map.setdefault(norm_key, []).append(candidate)

        return cls(
            exact_map=exact_map,
            exact_normalized_map=exact_normalized_map,
            fuzzy_map=fuzzy_map,
        )

    def lookup_exact(self, name: Optional[str]) -> Optional[CompanyCandidate]:
        key = exact_key(name)
        return self.exact_map.get(key) if key else None

    def lookup_normalized(self, key: str) -> List[CompanyCandidate]:
        return self.fuzzy_map.get(key, []) if key else []
