# tests/test_demos.py
from datetime import datetime
from unittest.mock import MagicMock, patch

from autoparts import app, demo_access_control, demo_crud
from autoparts.database import models
from autoparts.repositories.interfaces import IRoleRepository, ISalesOrderRepository
from autoparts.services.access_service import DEFAULT_ROLES, AccessControlService
from autoparts.services.catalog_service import CatalogService

# ===================================================================
#  접근 제어 데모
# ===================================================================
class TestAccessControlDemo:
    def test_run_prints_probe_results(self, capsys):
        # === Arrange ===
        role_repo = MagicMock(spec=IRoleRepository)
        role_repo.replace_all.return_value = len(DEFAULT_ROLES)
        role_repo.list_all.return_value = list(DEFAULT_ROLES)
        sales_repo = MagicMock(spec=ISalesOrderRepository)
        sales_repo.replace_all.return_value = 3
        sales_repo.list_visible_to.side_effect = lambda seller: [
            o for o in demo_access_control.SAMPLE_SALES_ORDERS if seller is None or o["createdBy"] == seller
        ]

        # === Act ===
        demo_access_control.run(AccessControlService(role_repo), sales_repo)

        # === Assert ===
        out = capsys.readouterr().out
        assert "Admin deletes a part: ALLOWED - Access granted" in out
        assert "Manager tries to delete a part: DENIED - Access denied" in out
        assert "Reporting user tries to edit an order: DENIED - Access denied" in out
        assert "sales_user1: 2" in out
        assert "admin: 3" in out

    def test_run_denies_role_with_null_resource_entry(self, capsys):
        # 시나리오: 'roles' 컬렉션의 admin 문서에 parts 항목이 null로 저장되어 있음
        # === Arrange ===
        role_repo = MagicMock(spec=IRoleRepository)
        role_repo.list_all.return_value = [
            models.Role.from_document({"name": "admin", "description": "Broken", "permissions": {"parts": None}})
        ]
        sales_repo = MagicMock(spec=ISalesOrderRepository)
        sales_repo.list_visible_to.return_value = []

        # === Act ===
        demo_access_control.run(AccessControlService(role_repo), sales_repo)

        # === Assert ===
        out = capsys.readouterr().out
        assert "Admin deletes a part: DENIED - Access denied" in out
        assert "    parts: " in out

    @patch("autoparts.demo_access_control.MongoSalesOrderRepository")
    @patch("autoparts.demo_access_control.MongoRoleRepository")
    @patch("autoparts.demo_access_control.DBConnector")
    def test_main_reports_role_document_without_name(self, mock_connector, mock_role_repo_cls, mock_sales_cls, capsys):
        # 시나리오: 'roles' 컬렉션에 name 필드가 없는 문서가 섞여 있음
        mock_role_repo_cls.return_value.list_all.side_effect = lambda: [
            models.Role.from_document({"_id": "r1", "permissions": {"parts": {"read": True}}})
        ]

        assert demo_access_control.main() == 1
        assert "'r1'" in capsys.readouterr().err

    def test_format_role_lists_each_resource(self):
        lines = demo_access_control.format_role(DEFAULT_ROLES[3])
        assert lines[0] == "역할: inventory (Warehouse keeper)"
        assert "    customers: read:no, write:no, delete:no" in lines

# ===================================================================
#  CRUD 데모
# ===================================================================
class TestCrudDemo:
    def test_run_creates_throwaway_part_when_no_zero_stock(self):
        # === Arrange ===
        catalog = MagicMock(spec=CatalogService)
        catalog.count_out_of_stock_parts.return_value = 0
        catalog.cheapest_parts.return_value = []
        catalog.get_part.return_value = {"partNumber": "FIL-001"}

        # === Act ===
        demo_crud.run(catalog, now=datetime(2024, 5, 1, 12, 0))

        # === Assert ===
        created = [c.args[0]["partNumber"] for c in catalog.create_part.call_args_list]
        assert created == [demo_crud.NEW_PART_NUMBER, "TEST-DELETE"]
        catalog.purge_out_of_stock_parts.assert_called_once_with()

    def test_sample_order_estimates_delivery_three_days_out(self):
        order = demo_crud.sample_order(datetime(2024, 5, 30, 9, 0))
        assert order["shipping"]["estimatedDelivery"] == "2024-06-02"

# ===================================================================
#  진입점
# ===================================================================
class TestApp:
    def test_unknown_command_prints_usage(self, capsys):
        assert app.main(["bogus"]) == 2
        assert "Usage" in capsys.readouterr().err

    def test_all_stops_at_first_failure(self):
        setup, crud, queries = MagicMock(return_value=0), MagicMock(return_value=1), MagicMock(return_value=0)
        commands = {"setup": setup, "crud": crud, "queries": queries}

        with patch.dict(app.COMMANDS, commands, clear=True):
            assert app.main(["all"]) == 1

        queries.assert_not_called()
