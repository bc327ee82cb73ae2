from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
import pytest

from concierge.recommendations.data_store import frame_to_records, load_catalog

CSV_TEXT = """id,name,address,lat,lng,rating,price_level,cuisines,dietary_options,popular_dishes,features
r1,Mario's,1 Main St,40.7,-74.0,4.1/5,$$,"Italian, Pizza","vegetarian, vegan:no",Tiramisu,outdoor seating
r2,,2 Main St,40.7,-74.0,3.9,2,chinese,,,
r3,Golden Wok,,,,4.5,1,chinese,,"Fried Rice, Dumplings",
"""


@pytest.fixture
def catalog_csv(tmp_path: Path) -> Path:
    path = tmp_path / "restaurants.csv"
    path.write_text(CSV_TEXT)
    return path


class TestLoadCatalog:
    def test_loads_valid_rows(self, catalog_csv: Path):
        records = load_catalog(catalog_csv)
        assert [r.id for r in records] == ["r1", "r3"]

    def test_normalizes_fields(self, catalog_csv: Path):
        mario = load_catalog(catalog_csv)[0]
        assert mario.rating == 4.1
        assert mario.price_level == 2
        assert mario.cuisines == ("italian", "pizza")
        assert mario.location.lat == 40.7
        assert mario.features == ("outdoor seating",)

    def test_dietary_option_flags(self, catalog_csv: Path):
        mario = load_catalog(catalog_csv)[0]
        assert mario.accommodation("vegetarian").available is True
        assert mario.accommodation("vegan").available is False

    def test_missing_values_become_defaults(self, catalog_csv: Path):
        wok = load_catalog(catalog_csv)[1]
        assert wok.address == ""
        assert wok.location.lat == 0.0
        assert wok.features == ()
        assert wok.dietary_options == ()
        assert wok.popular_dishes == ("Fried Rice", "Dumplings")

    def test_malformed_row_is_logged(self, catalog_csv: Path, caplog):
        with caplog.at_level(logging.WARNING):
            load_catalog(catalog_csv)
        assert "Skipping malformed catalog row" in caplog.text

    def test_bundled_catalog(self):
        records = load_catalog()
        assert len(records) == 8
        assert len({r.id for r in records}) == 8
        assert all(1 <= r.price_level <= 4 for r in records)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.csv")


class TestFrameToRecords:
    def test_missing_columns_are_tolerated(self):
        df = pd.DataFrame([{"id": "a", "name": "A", "price_level": "3"}])
        records = frame_to_records(df)
        assert len(records) == 1
        assert records[0].price_level == 3
        assert records[0].cuisines == ()

    def test_bad_price_level_skips_row(self):
        df = pd.DataFrame([
            {"id": "a", "name": "A", "price_level": "cheap"},
            {"id": "b", "name": "B", "price_level": "$$$$"},
        ])
        assert [r.id for r in frame_to_records(df)] == ["b"]

    def test_does_not_mutate_input(self):
        df = pd.DataFrame([{"id": "a", "name": "A", "price_level": "1"}])
        frame_to_records(df)
        assert list(df.columns) == ["id", "name", "price_level"]
