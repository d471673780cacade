from digest import MIN_PARTIAL_CHARS, build_digest, select_sections


def test_empty_and_duplicate_sections_are_dropped():
    sections = {"experience": "Engineer", "work experience": " Engineer ", "skills": "", "education": "MSc"}
    assert select_sections(sections) == [("experience", "Engineer"), ("education", "MSc")]


def test_longest_section_first_with_stable_ties():
    sections = {"a": "xx", "b": "yyyy", "c": "zz"}
    assert [name for name, _ in select_sections(sections)] == ["b", "a", "c"]


def test_render_format():
    digest = build_digest({"skills": "Python", "education": "BSc Math"})
    assert digest == "=== education ===\nBSc Math\n\n=== skills ===\nPython"


def test_truncates_when_enough_budget_remains():
    sections = {"long": "a" * 900, "next": "b" * 400}
    pairs = select_sections(sections, max_total_length=1200)
    assert pairs == [("long", "a" * 900), ("next", "b" * 300)]


def test_stops_when_remaining_budget_too_small():
    sections = {"long": "a" * 900, "mid": "b" * 400, "short": "c" * 50}
    pairs = select_sections(sections, max_total_length=900 + MIN_PARTIAL_CHARS - 1)
    # "short" would fit, but selection halts at the first section that cannot
    assert pairs == [("long", "a" * 900)]


def test_content_never_exceeds_budget():
    sections = {f"s{i}": chr(97 + i) * (137 * (i + 1)) for i in range(10)}
    for budget in (0, 150, 199, 200, 1000, 3333, 8000):
        pairs = select_sections(sections, max_total_length=budget)
        assert sum(len(text) for _, text in pairs) <= budget


def test_empty_map():
    assert build_digest({}) == ""
