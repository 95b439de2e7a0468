from __future__ import annotations

from datetime import date

import orjson
import pytest

from pocket_calendar import cli


def test_render_grid_month_with_events() -> None:
    payload = cli.render_grid(
        anchor=date(2024, 6, 15),
        events=[("2024-06-15", "Meeting"), ("2024-06-15", "Lunch")],
        today=date(2024, 6, 15),
    )
    record = orjson.loads(payload)

    assert record["header"] == "June 2024"
    assert record["view"] == "month"
    assert len(record["rows"]) == 6
    cell = record["rows"][2][6]
    assert cell["date"] == "2024-06-15"
    assert [event["title"] for event in cell["events"]] == ["Meeting", "Lunch"]
    assert [event["index"] for event in cell["events"]] == [0, 1]


def test_render_grid_rejects_blank_title() -> None:
    with pytest.raises(ValueError):
        cli.render_grid(anchor=date(2024, 6, 15), events=[("2024-06-15", " ")])


def test_main_grid_prints_week(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["grid", "--date", "2024-06-15", "--view", "week", "--event", "2024-06-12=Standup"])

    record = orjson.loads(capsys.readouterr().out)
    assert record["view"] == "week"
    assert [cell["date"] for cell in record["rows"][0]][0] == "2024-06-09"
    wednesday = record["rows"][0][3]
    assert wednesday["events"] == [{"index": 0, "title": "Standup", "date": "2024-06-12"}]


@pytest.mark.parametrize(
    "argv",
    [
        ["grid", "--date", "15-06-2024"],
        ["grid", "--event", "2024-06-15"],
        ["grid", "--event", "2024-13-01=Nope"],
        ["grid", "--view", "year"],
    ],
)
def test_main_grid_rejects_bad_arguments(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    assert excinfo.value.code == 2
