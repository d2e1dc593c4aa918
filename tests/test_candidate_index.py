from types import SimpleNamespace

import pytest

from app.services.reconciliation.candidate_index import CandidateIndex


def _company(company_id, name):
    return SimpleNamespace(id=company_id, name=name)


@pytest.mark.unit
def test_build_indexes_raw_and_normalized_keys():
    index = CandidateIndex.build([_company("c1", "Acme S.r.l."), _company("c2", "Beta SpA")])

    assert index.lookup_exact("ACME S.R.L.").id == "c1"
    assert index.exact_normalized_map["acme"].id == "c1"
    assert [c.id for c in index.lookup_normalized("beta")] == ["c2"]


@pytest.mark.unit
def test_first_company_wins_for_duplicate_keys():
    index = CandidateIndex.build([
        _company("c1", "Foo Bar Srl"),
        _company("c2", "Foo Bar SpA"),
        _company("c3", "foo bar srl"),
    ])

    assert index.lookup_exact("Foo Bar Srl").id == "c1"
    assert index.exact_normalized_map["foo bar"].id == "c1"
    assert [c.id for c in index.fuzzy_map["foo bar"]] == ["c1", "c2", "c3"]


@pytest.mark.unit
def test_empty_names_are_not_indexed():
    index = CandidateIndex.build([_company("c1", None), _company("c2", "   "), _company("c3", "Srl")])

    assert index.exact_map.keys() == {"srl"}
    assert index.fuzzy_map == {}
    assert index.lookup_exact("") is None
    assert index.lookup_normalized("") == []
