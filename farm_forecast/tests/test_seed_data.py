import csv

import pytest
from farm_forecast.backend import seed_data
from farm_forecast.config import set_config_for_test
from farm_forecast.logging import configure_logging
from farm_forecast.data.backends.csv_backend import CsvInventoryDataSource
from farm_forecast.forecast import forecast

@pytest.fixture(autouse=True)
def quiet_logs():
    set_config_for_test(log_level="WARNING")
    configure_logging()

def read_rows(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))

def test_generates_loadable_inventory(tmp_path):
    """Generated CSV loads through the data source and feeds the forecaster."""
    assert seed_data.main(["--farms", "4", "--output-dir", str(tmp_path), "--seed", "7"]) == 0

    rows = read_rows(tmp_path / "inventory.csv")
    assert rows
    assert list(rows[0].keys()) == seed_data.COLUMNS
    assert len({r["farm_name"] for r in rows}) == 4

    records = CsvInventoryDataSource(data_dir=tmp_path).get_inventory()
    assert len(records) == len(rows)
    for horizon in (7, 14, 30, 60):
        suggestions = forecast(records, horizon)
        assert len(suggestions) <= len(records)

def test_same_seed_same_output(tmp_path):
    a, b = tmp_path / "a", tmp_path / "b"
    seed_data.main(["--farms", "3", "--output-dir", str(a), "--seed", "11"])
    seed_data.main(["--farms", "3", "--output-dir", str(b), "--seed", "11"])
    assert (a / "inventory.csv").read_text() == (b / "inventory.csv").read_text()

def test_no_overwrite(tmp_path):
    (tmp_path / "inventory.csv").write_text("keep me", encoding="utf-8")
    code = seed_data.main(["--output-dir", str(tmp_path), "--no-overwrite"])
    assert code == 2
    assert (tmp_path / "inventory.csv").read_text(encoding="utf-8") == "keep me"

def test_rejects_non_positive_farms(tmp_path):
    with pytest.raises(SystemExit):
        seed_data.main(["--farms", "0", "--output-dir", str(tmp_path)])
