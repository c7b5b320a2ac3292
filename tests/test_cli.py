import csv
import io
import json

from geocircles.cli import main


def test_generate_table_output(capsys):
    code = main(["generate", "--lat", "40.7128", "--lon", "-74.0060", "--distance", "1", "--distance", "3", "--step", "90"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.splitlines()[0] == "Generated 8 points for 2 circle(s)."
    assert len(out.splitlines()) == 9


def test_generate_csv_output_skips_invalid_distances(capsys):
    code = main(
        ["generate", "--lat", "0", "--lon", "0", "--distance", "2", "--distance", "", "--distance", "0", "--format", "csv"]
    )
    rows = list(csv.reader(io.StringIO(capsys.readouterr().out)))
    assert code == 0
    assert rows[0] == ["Distance (miles)", "Angle (degrees)", "Latitude", "Longitude"]
    assert len(rows) == 1 + 36
    assert {r[0] for r in rows[1:]} == {"2"}


def test_generate_json_output(capsys):
    code = main(["generate", "--lat", "10", "--lon", "20", "--distance", "5", "--step", "120", "--format", "json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["meta"]["point_count"] == 3
    assert [p["angle"] for p in payload["points"]] == [0, 120, 240]


def test_generate_writes_html_file(tmp_path, capsys):
    target = tmp_path / "rings.html"
    code = main(
        ["generate", "--lat", "0", "--lon", "0", "--distance", "1", "--step", "90", "--format", "html", "--output", str(target)]
    )
    assert code == 0
    assert "Wrote 4 points" in capsys.readouterr().out
    assert target.read_text(encoding="utf-8").count("<tr>") == 5


def test_generate_without_valid_distances_exits_with_usage_error(capsys):
    code = main(["generate", "--lat", "0", "--lon", "0", "--distance", "abc"])
    assert code == 2
    assert "at least one valid distance" in capsys.readouterr().err


def test_generate_rejects_out_of_range_latitude(capsys):
    code = main(["generate", "--lat", "91", "--lon", "0", "--distance", "1"])
    assert code == 2
    assert "Invalid Latitude. Must be between -90 and 90." in capsys.readouterr().err


def test_generate_rejects_too_many_distances(capsys):
    args = ["generate", "--lat", "0", "--lon", "0"]
    for d in range(1, 8):
        args += ["--distance", str(d)]
    assert main(args) == 2
    assert "at most 5" in capsys.readouterr().err


def test_settings_command_prints_json(capsys):
    assert main(["settings"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["generator"]["max_distances"] == 5
