from types import SimpleNamespace

import pytest

from app.schemas.investor_reconciliation import CompanyCandidate
from app.services.reconciliation.candidate_index import CandidateIndex
from app.services.reconciliation.matcher import (
    DEFAULT_TUNING,
    MatchTuning,
    match_investor,
    rank_partial_candidates,
    resolve_ranked_candidates,
    score_company_key,
)


def _investor(client_name, client_company_id=None, full_name="Jane Doe", investor_id="i1"):
    return SimpleNamespace(
        id=investor_id,
        full_name=full_name,
        client_name=client_name,
        client_company_id=client_company_id,
    )


def _index(*companies):
    return CandidateIndex.build([SimpleNamespace(id=cid, name=name) for cid, name in companies])


@pytest.mark.unit
def test_partial_containment_single_candidate_matches():
    index = _index(("c1", "MarshYellow Group"))

    result = match_investor(_investor("MarshYellow", investor_id="i1"), index)

    assert result.status == "matched"
    assert result.match_type == "normalized"
    assert result.matched_company_id == "c1"
    assert result.matched_company_name == "MarshYellow Group"
    expected = len("marshyellow") / len("marshyellow group") * 85
    assert score_company_key("marshyellow", "marshyellow group") == pytest.approx(expected)
    assert expected >= DEFAULT_TUNING.score_floor


@pytest.mark.unit
def test_already_set_wins_regardless_of_client_name():
    index = _index(("c1", "Acme"))

    result = match_investor(_investor("Acme", client_company_id="c9", full_name=None), index)

    assert result.status == "already_set"
    assert result.investor_name == "N/A"
    assert not hasattr(result, "candidates")


@pytest.mark.unit
def test_raw_exact_beats_normalized_match():
    # "acme srl" is a raw key of c2 and the normalized key "acme" belongs to c1
    index = _index(("c1", "Acme"), ("c2", "ACME SRL"))

    result = match_investor(_investor("acme srl"), index)

    assert result.status == "matched"
    assert result.match_type == "exact"
    assert result.matched_company_id == "c2"


@pytest.mark.unit
def test_normalized_exact_match_is_reported_as_exact():
    index = _index(("c1", "Acme S.r.l."))

    result = match_investor(_investor("ACME SRL"), index)

    assert result.status == "matched"
    assert result.match_type == "exact"
    assert result.matched_company_id == "c1"


@pytest.mark.unit
def test_shared_normalized_key_is_ambiguous():
    index = _index(("c1", "Foo Bar Srl"), ("c2", "Foo Bar SpA"))

    result = match_investor(_investor("Foo Bar"), index)

    assert result.status == "ambiguous"
    assert [c.id for c in result.candidates] == ["c1", "c2"]


@pytest.mark.unit
def test_short_key_skips_scoring():
    index = _index(("c1", "Abc Holdings"))

    result = match_investor(_investor("Abc"), index)

    assert result.status == "not_found"


@pytest.mark.unit
def test_no_candidates_above_floor_is_not_found():
    index = _index(("c1", "Completely Different"))

    result = match_investor(_investor("Zzyzx Holdings"), index)

    assert result.status == "not_found"
    assert result.client_name == "Zzyzx Holdings"


@pytest.mark.unit
def test_blank_client_name_is_not_found():
    index = _index(("c1", "Acme"))

    assert match_investor(_investor(None), index).status == "not_found"


@pytest.mark.unit
def test_score_company_key_tiers():
    assert score_company_key("acme", "acme") == 100
    assert score_company_key("acme group", "acme") == pytest.approx(4 / 10 * 85)
    assert score_company_key("alphabet", "alpha") == pytest.approx(5 / 8 * 85)
    assert score_company_key("", "acme") == 0
    # word overlap: "rossi" and "figli" match, three words on the longer side
    assert score_company_key("rossi figli", "figli rossi partners") == pytest.approx(2 / 3 * 65)


@pytest.mark.unit
def test_rank_dedupes_by_company_and_sorts_best_first():
    index = _index(("c1", "Acme Group"), ("c2", "Acme Group Intl"), ("c3", "Unrelated"))

    ranked = rank_partial_candidates("acme group", index)

    assert [c.id for c, _ in ranked] == ["c1", "c2"]
    assert ranked[0][1] == 100
    assert ranked[1][1] == pytest.approx(10 / 15 * 85)


def _ranked(*scores):
    return [(CompanyCandidate(id=f"c{n}", name=f"Company {n}"), score) for n, score in enumerate(scores, 1)]


@pytest.mark.unit
def test_gap_rule_auto_resolves_clear_winner():
    result = resolve_ranked_candidates(_investor("x"), _ranked(80, 60), DEFAULT_TUNING)

    assert result.status == "matched"
    assert result.match_type == "normalized"
    assert result.matched_company_id == "c1"


@pytest.mark.unit
def test_gap_rule_close_scores_are_ambiguous():
    result = resolve_ranked_candidates(_investor("x"), _ranked(80, 70), DEFAULT_TUNING)

    assert result.status == "ambiguous"
    assert [c.id for c in result.candidates] == ["c1", "c2"]


@pytest.mark.unit
def test_gap_rule_requires_top_above_floor():
    result = resolve_ranked_candidates(_investor("x"), _ranked(65, 50), DEFAULT_TUNING)

    assert result.status == "ambiguous"


@pytest.mark.unit
def test_tuning_is_configurable():
    strict = MatchTuning(score_floor=60.0)
    index = _index(("c1", "MarshYellow Group"))

    assert match_investor(_investor("MarshYellow"), index, strict).status == "not_found"


@pytest.mark.unit
def test_prefix_scores_as_containment():
    assert score_company_key("acme", "acmeco") == pytest.approx(4 / 6 * 85)
    assert score_company_key("acmeco", "acme") == pytest.approx(4 / 6 * 85)
