# tests/database/test_db_init.py
import json
import pytest
from unittest.mock import MagicMock, call, patch
from pymongo import ASCENDING
from pymongo.errors import ServerSelectionTimeoutError

from autoparts.database import db_init
from autoparts.database.db_init import COLLECTION_INDEXES, initialize_db, load_json, seed_collection
from autoparts.services.exceptions import FixtureLoadError


@pytest.fixture
def mock_db():
    """컬렉션 이름별로 서로 다른 모의 컬렉션을 돌려주는 Database 모의 객체."""
    collections = {}

    def get_collection(name):
        return collections.setdefault(name, MagicMock(name=name))

    db = MagicMock()
    db.__getitem__.side_effect = get_collection
    db.collections = collections
    return db


class TestLoadJson:
    def test_load_json_reads_array(self, tmp_path):
        (tmp_path / "parts.json").write_text(json.dumps([{"partNumber": "FIL-001"}]), encoding="utf-8")
        assert load_json("parts.json", tmp_path) == [{"partNumber": "FIL-001"}]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FixtureLoadError):
            load_json("missing.json", tmp_path)

    def test_invalid_json(self, tmp_path):
        (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(FixtureLoadError):
            load_json("bad.json", tmp_path)

    def test_top_level_must_be_array(self, tmp_path):
        (tmp_path / "obj.json").write_text('{"partNumber": "FIL-001"}', encoding="utf-8")
        with pytest.raises(FixtureLoadError, match="JSON array"):
            load_json("obj.json", tmp_path)

    def test_bundled_fixtures_are_loadable(self):
        """저장소에 포함된 data/*.json 픽스처가 모두 올바른지 확인합니다."""
        for name in COLLECTION_INDEXES:
            assert load_json(f"{name}.json"), f"{name}.json is empty"


class TestSeedCollection:
    def test_seed_clears_inserts_and_indexes(self, mock_db):
        # === Arrange ===
        documents = [{"orderId": "ORD-001"}, {"orderId": "ORD-002"}]
        mock_db["orders"].insert_many.return_value.inserted_ids = ["a", "b"]

        # === Act ===
        inserted = seed_collection(mock_db, "orders", documents)

        # === Assert ===
        collection = mock_db.collections["orders"]
        assert inserted == 2
        collection.delete_many.assert_called_once_with({})
        collection.insert_many.assert_called_once_with(documents)
        assert collection.create_index.call_args_list[0] == call([("orderId", ASCENDING)], unique=True)
        assert collection.create_index.call_count == len(COLLECTION_INDEXES["orders"])

    def test_seed_with_empty_fixture_skips_insert(self, mock_db):
        assert seed_collection(mock_db, "parts", []) == 0
        mock_db.collections["parts"].insert_many.assert_not_called()

    def test_unique_indexes(self):
        unique = {name: [f for f, u in indexes if u] for name, indexes in COLLECTION_INDEXES.items()}
        assert unique == {"parts": ["partNumber"], "customers": ["customerId", "email"], "orders": ["orderId"]}


class TestInitializeDb:
    def test_initialize_seeds_every_collection(self, mock_db, tmp_path):
        # === Arrange ===
        for name in COLLECTION_INDEXES:
            (tmp_path / f"{name}.json").write_text(json.dumps([{"n": 1}]), encoding="utf-8")
            mock_db[name].insert_many.return_value.inserted_ids = ["x"]

        # === Act ===
        counts = initialize_db(mock_db, tmp_path)

        # === Assert ===
        assert counts == {"parts": 1, "customers": 1, "orders": 1}

    @patch("autoparts.database.db_init.DBConnector")
    def test_main_reports_connection_failure(self, mock_connector, capsys):
        # 시나리오: MongoDB 서버에 연결할 수 없음
        mock_connector.return_value.__enter__.side_effect = ServerSelectionTimeoutError("no servers")

        assert db_init.main() == 1
        assert "no servers" in capsys.readouterr().err


class TestDBConnector:
    @patch("autoparts.database.db_connector.create_client")
    def test_connection_closed_after_block(self, mock_create_client):
        from autoparts.database.db_connector import DBConnector
        client = mock_create_client.return_value

        with DBConnector(db_name="test_db"):
            client.close.assert_not_called()

        client.__getitem__.assert_called_once_with("test_db")
        client.close.assert_called_once_with()

    @patch("autoparts.database.db_connector.create_client")
    def test_connection_closed_when_ping_fails(self, mock_create_client):
        from autoparts.database.db_connector import DBConnector
        client = mock_create_client.return_value
        client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(ServerSelectionTimeoutError):
            with DBConnector():
                pass

        client.close.assert_called_once_with()
