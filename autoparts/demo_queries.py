import sys

from pymongo.database import Database
from pymongo.errors import PyMongoError

from autoparts.database.db_connector import DBConnector
from autoparts.repositories.mongo import MongoCustomerRepository, MongoOrderRepository, MongoPartRepository
from autoparts.services.report_service import ReportService
from autoparts.utils.console import section, to_json


def run(reports: ReportService) -> None:
    print("===== 집계 쿼리 데모 =====")

    section("쿼리 1: 가장 많이 팔린 부품 Top 5")
    print(to_json(reports.top_selling_parts(5)))

    section("쿼리 2: 월별/카테고리별 판매 분석")
    print(to_json(reports.monthly_sales_by_category()))

    section("쿼리 3: 도시별 고객 요약")
    print(to_json(reports.customers_by_city()))

    section("쿼리 4: 가장 활발한 고객 Top 5")
    print(to_json(reports.most_active_customers(5)))

    section("쿼리 5: 카테고리별 재고 가치")
    print(to_json(reports.category_inventory_value()))

    print("\n모든 집계 쿼리 시연이 완료되었습니다.")


def build_report_service(db: Database) -> ReportService:
    return ReportService(MongoPartRepository(db), MongoCustomerRepository(db), MongoOrderRepository(db))


def main() -> int:
    try:
        with DBConnector() as db:
            run(build_report_service(db))
    except PyMongoError as e:
        print(f"집계 쿼리 실행 중 오류 발생: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
