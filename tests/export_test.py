import pandas as pd

from bikeshare.services.export import export_report, export_trips


def trips():
    return pd.DataFrame(
        {
            "ride_id": ["A", "B"],
            "member_casual": ["member", "casual"],
            "duration_mins": [12.5, 30.0],
            "day_type": ["Weekend", "Middle Weekday"],
        }
    )


def test_export_drops_duration(tmp_path):
    path = export_trips(trips(), tmp_path / "out" / "trips.csv")

    exported = pd.read_csv(path)
    assert "duration_mins" not in exported.columns
    assert exported.columns.tolist() == ["ride_id", "member_casual", "day_type"]
    assert len(exported) == 2


def test_export_keeps_input_untouched(tmp_path):
    df = trips()
    export_trips(df, tmp_path / "trips.csv")
    assert "duration_mins" in df.columns


def test_export_report_writes_both_tables(tmp_path):
    written = export_report(trips(), trips().iloc[:1], tmp_path)

    assert set(written) == {"cleaned", "sample"}
    for path in written.values():
        assert "duration_mins" not in pd.read_csv(path).columns
    assert len(pd.read_csv(written["sample"])) == 1


def test_export_report_sample_only(tmp_path):
    written = export_report(None, trips(), tmp_path)
    assert set(written) == {"sample"}
    assert not (tmp_path / "trips_cleaned.csv").exists()
