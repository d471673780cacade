import json

from store import JsonResultStore


def test_missing_file_reads_empty(tmp_path):
    assert JsonResultStore(tmp_path / "nope.json").read_all() == []


def test_append_persists_in_order(tmp_path):
    path = tmp_path / "out" / "resumes.json"
    store = JsonResultStore(path)
    store.append({"profile": {"name": "A"}})
    store.append({"profile": {"name": "B"}})

    assert [r["profile"]["name"] for r in store.read_all()] == ["A", "B"]
    assert json.loads(path.read_text(encoding="utf-8"))["resumes"][1]["profile"]["name"] == "B"


def test_reopen_sees_previous_records(tmp_path):
    path = tmp_path / "resumes.json"
    JsonResultStore(path).append({"awards": []})
    assert JsonResultStore(path).read_all() == [{"awards": []}]
