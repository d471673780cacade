from cleaner import clean_list, normalize_header, strip_bullet


def test_normalize_header_ignores_case_and_punctuation():
    assert normalize_header("Work  Experience!") == normalize_header("work experience")
    assert normalize_header("Work  Experience!") == "work experience"


def test_normalize_header_ampersand_becomes_and():
    assert normalize_header("Skills & Interests") == "skills and interests"


def test_normalize_header_is_idempotent():
    for raw in ["  PROFESSIONAL\tEXPERIENCE:  ", "Founder & Product Experience", "•", "R&D / Lab-Work"]:
        once = normalize_header(raw)
        assert normalize_header(once) == once


def test_normalize_header_punctuation_only_is_empty():
    assert normalize_header(" • — ") == ""


def test_strip_bullet():
    assert strip_bullet("•  Built thing") == "Built thing"
    assert strip_bullet("* starred") == "starred"
    assert strip_bullet("plain") == "plain"


def test_clean_list_trims_dedupes_and_keeps_order():
    assert clean_list([" b", "a", "b ", "", "  ", "a"]) == ["b", "a"]
    assert clean_list(None) == []
