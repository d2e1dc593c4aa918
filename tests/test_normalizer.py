import pytest

from app.services.reconciliation.normalizer import exact_key, normalize_company_name


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Acme S.r.l.", "acme"),
        ("ACME SRL", "acme"),
        ("Working Mom Srl SB", "working mom"),
        ("  Foo   Bar  S.p.A. ", "foo bar"),
        ("Alpha-Beta/Gamma", "alphabetagamma"),
        ("Rossi & Figli snc", "rossi & figli"),
        ("Cooperativa S.C.A.R.L.", "cooperativa"),
        ("Spazio Srl", "spazio"),
    ],
)
def test_normalize_company_name(raw, expected):
    assert normalize_company_name(raw) == expected


@pytest.mark.unit
def test_suffix_inside_word_is_kept():
    assert normalize_company_name("Spartan Sassi") == "spartan sassi"


@pytest.mark.unit
@pytest.mark.parametrize("empty", [None, "", "   "])
def test_normalize_empty_input(empty):
    assert normalize_company_name(empty) == ""


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    ["Acme S.r.l.", "Working Mom Srl SB", "  a.b.c  ", "S.p.A.", "Foo;Bar:Baz_Qux", "MarshYellow Group"],
)
def test_normalize_is_idempotent(raw):
    once = normalize_company_name(raw)
    assert normalize_company_name(once) == once


@pytest.mark.unit
def test_exact_key_only_lowercases_and_trims():
    assert exact_key("  Acme S.r.l. ") == "acme s.r.l."
    assert exact_key(None) == ""
