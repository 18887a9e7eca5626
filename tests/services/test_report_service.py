# tests/services/test_report_service.py
import pytest
from unittest.mock import MagicMock

from autoparts.services import report_service
from autoparts.services.report_service import ReportService
from autoparts.repositories.interfaces import ICustomerRepository, IOrderRepository, IPartRepository


@pytest.fixture
def repos():
    """세 리포지토리의 모의 객체를 (parts, customers, orders) 순서로 반환합니다."""
    return MagicMock(spec=IPartRepository), MagicMock(spec=ICustomerRepository), MagicMock(spec=IOrderRepository)

@pytest.fixture
def reports(repos) -> ReportService:
    return ReportService(*repos)


def stage_names(pipeline):
    return [next(iter(stage)) for stage in pipeline]


class TestPipelines:
    def test_top_selling_parts_limits_before_lookup(self):
        """상위 N개로 자른 뒤에 parts를 조인해야 불필요한 $lookup이 줄어듭니다."""
        pipeline = report_service.top_selling_parts_pipeline(3)

        names = stage_names(pipeline)
        assert names == ["$unwind", "$group", "$sort", "$limit", "$lookup", "$unwind", "$project"]
        assert pipeline[3] == {"$limit": 3}
        assert pipeline[4]["$lookup"]["from"] == "parts"

    def test_line_revenue_applies_percentage_discount(self):
        """매출식: quantity * (price - price * discount / 100)"""
        group = report_service.monthly_sales_by_category_pipeline()[4]["$group"]
        revenue = group["totalRevenue"]["$sum"]

        quantity, net_price = revenue["$multiply"]
        assert quantity == "$items.quantity"
        price, discount_amount = net_price["$subtract"]
        assert price == "$items.priceAtPurchase"
        assert discount_amount == {"$multiply": ["$items.priceAtPurchase", {"$divide": ["$items.discount", 100]}]}

    def test_most_active_customers_only_with_orders(self):
        pipeline = report_service.most_active_customers_pipeline()
        assert {"$match": {"totalOrders": {"$gt": 0}}} in pipeline
        assert {"$limit": 5} in pipeline

    def test_inventory_value_sorted_descending(self):
        pipeline = report_service.category_inventory_value_pipeline()
        assert pipeline[1] == {"$sort": {"totalInventoryValue": -1}}


class TestReportService:
    def test_reports_run_on_the_right_collection(self, reports: ReportService, repos):
        # === Arrange ===
        part_repo, customer_repo, order_repo = repos
        order_repo.aggregate.return_value = [{"partNumber": "ENG-001", "totalSold": 64}]

        # === Act ===
        top = reports.top_selling_parts()
        reports.monthly_sales_by_category()
        reports.customers_by_city()
        reports.most_active_customers()
        reports.category_inventory_value()

        # === Assert ===
        assert top == [{"partNumber": "ENG-001", "totalSold": 64}]
        assert order_repo.aggregate.call_count == 2
        assert customer_repo.aggregate.call_count == 2
        part_repo.aggregate.assert_called_once_with(report_service.category_inventory_value_pipeline())
