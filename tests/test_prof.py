import csv

from faces.prof import Prof


def test_sections_accumulate(tmp_path):
    prof = Prof()
    with prof.section("a"):
        pass
    with prof.section("a"):
        pass
    prof.stop("never-started")
    assert len(prof.events) == 2
    assert set(prof.accum) == {"a"}
    assert prof.total() >= 0.0
    assert prof.report_lines()[0] == "=== TIME REPORT ==="

    path = tmp_path / "t" / "timings.csv"
    prof.dump_csv(str(path))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["name", "dt_sec"]
    assert len(rows) == 3


def test_disabled_records_nothing():
    prof = Prof(enabled=False)
    with prof.section("a"):
        pass
    assert prof.events == [] and prof.accum == {}
