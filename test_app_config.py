"""
Tests for locating the bundled sample data.
"""

import json

from app_config import default_mock_data_path, MOCK_DATA_PATH
from store_loader import StoreLoader


class TestMockDataPath:

    def test_checkout_copy_preferred(self, tmp_path):
        (tmp_path / "data").mkdir()
        (tmp_path / "data" / "mock_data.json").write_text("{}", encoding="utf-8")
        path = default_mock_data_path(tmp_path, tmp_path / "share")
        assert path == str(tmp_path / "data" / "mock_data.json")

    def test_installed_copy_without_checkout(self, tmp_path):
        installed = tmp_path / "share" / "nexmart-chat"
        installed.mkdir(parents=True)
        (installed / "mock_data.json").write_text(json.dumps({
            "products": [{"id": "p1", "name": "Phone", "category": "electronics", "price": 100}],
            "orders": [],
        }), encoding="utf-8")

        path = default_mock_data_path(tmp_path / "site-packages", installed)
        assert path == str(installed / "mock_data.json")

        loader = StoreLoader(base_url="", mock_data_path=path).load_all()
        assert [p.id for p in loader.catalog.all()] == ["p1"]

    def test_default_points_at_existing_file(self):
        loader = StoreLoader(base_url="", mock_data_path=MOCK_DATA_PATH).load_all()
        assert len(loader.catalog) == 16
