import sys
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional

from pymongo.database import Database
from pymongo.errors import PyMongoError

from autoparts.database.db_connector import DBConnector
from autoparts.repositories.mongo import MongoCustomerRepository, MongoOrderRepository, MongoPartRepository
from autoparts.services.catalog_service import CatalogService
from autoparts.services.exceptions import DuplicateDocumentError, PartNotFoundError
from autoparts.utils.console import section, to_json

NEW_PART_NUMBER = "FIL-003"
NEW_CUSTOMER_ID = "C011"
NEW_ORDER_ID = "ORD-011"


def sample_part() -> Dict[str, Any]:
    return {
        "partNumber": NEW_PART_NUMBER,
        "name": "Cabin Air Filter",
        "category": "Filters",
        "manufacturer": "Bosch",
        "price": 18.5,
        "compatibleCars": ["BMW", "Mercedes", "Audi", "VW"],
        "stockQuantity": 25,
        "location": "A1-14",
        "specifications": {
            "size": "240mm x 190mm",
            "filterType": "Carbon",
            "material": "Activated carbon",
        },
    }


def sample_customer(today: date) -> Dict[str, Any]:
    return {
        "customerId": NEW_CUSTOMER_ID,
        "firstName": "Alexander",
        "lastName": "Popov",
        "email": "alex.popov@example.com",
        "phone": "0898123456",
        "address": {
            "street": "56 Maritsa St",
            "city": "Plovdiv",
            "postalCode": "4000",
            "country": "Bulgaria",
        },
        "registrationDate": today.isoformat(),
        "loyaltyPoints": 0,
        "customerType": "retail",
        "carDetails": [{"make": "Ford", "model": "Focus", "year": 2021, "vin": "1FADP3F23HL123456"}],
    }


def sample_order(now: datetime) -> Dict[str, Any]:
    return {
        "orderId": NEW_ORDER_ID,
        "customerId": NEW_CUSTOMER_ID,
        "orderDate": now.isoformat(),
        "status": "Processing",
        "items": [{"partNumber": NEW_PART_NUMBER, "quantity": 1, "priceAtPurchase": 18.5, "discount": 0}],
        "shipping": {
            "method": "Standard",
            "cost": 5.0,
            "trackingNumber": "",
            "estimatedDelivery": (now + timedelta(days=3)).date().isoformat(),
        },
        "payment": {"method": "CreditCard", "transactionId": "TXN-NEW", "amount": 23.5, "status": "Paid"},
    }


def run(catalog: CatalogService, now: Optional[datetime] = None) -> None:
    """CREATE -> READ -> UPDATE -> DELETE 순서로 CRUD 작업을 시연합니다."""
    now = now or datetime.now()
    print("===== CRUD 작업 데모 =====")

    section("CREATE")
    part = sample_part()
    print(f"새 부품 등록, _id: {catalog.create_part(part)}")
    print(to_json(part))
    print(f"새 고객 등록, _id: {catalog.create_customer(sample_customer(now.date()))}")
    print(f"새 주문 등록, _id: {catalog.create_order(sample_order(now))}")

    section("READ")
    try:
        print(f"부품 번호로 조회: {to_json(catalog.get_part('FIL-001'))}")
    except PartNotFoundError as e:
        print(f"부품 번호로 조회 실패: {e}")
    print(f"70 이상인 브레이크 부품: {len(catalog.find_parts_by_category('Brake System', 70))}개")
    print(f"BMW 호환 부품: {len(catalog.find_parts_compatible_with('BMW'))}개")
    print(f"이름에 'filter'가 포함된 부품: {len(catalog.search_parts_by_name('filter'))}개")
    print(f"가장 저렴한 부품 5개: {to_json(catalog.cheapest_parts(5))}")

    section("UPDATE")
    print(f"부품 가격 수정: {catalog.update_part_price(NEW_PART_NUMBER, 19.99)}건 변경")
    print(f"고객 적립 포인트 증가: {catalog.add_loyalty_points(NEW_CUSTOMER_ID, 20)}건 변경")
    print(f"주문 배송 처리: {catalog.ship_order(NEW_ORDER_ID, 'BG7890123456')}건 변경")
    print(f"Bosch 부품 가격 5% 인상: {catalog.raise_manufacturer_prices('Bosch', 5)}건 변경")
    print(f"호환 차종 추가: {catalog.add_compatible_car(NEW_PART_NUMBER, 'Skoda')}건 변경")

    section("DELETE")
    print(f"부품 삭제: {catalog.delete_part(NEW_PART_NUMBER)}건 삭제")
    if catalog.count_out_of_stock_parts() == 0:
        # 재고 0인 부품이 없으면 시연을 위해 임시 부품을 하나 만듭니다.
        print("재고가 0인 부품이 없어 테스트용 부품을 생성합니다.")
        catalog.create_part({"partNumber": "TEST-DELETE", "name": "Test part for deletion", "stockQuantity": 0})
    print(f"재고 0 부품 삭제: {catalog.purge_out_of_stock_parts()}건 삭제")
    print(f"주문 삭제: {catalog.delete_order(NEW_ORDER_ID)}건 삭제")
    print(f"고객 삭제: {catalog.delete_customer(NEW_CUSTOMER_ID)}건 삭제")

    print("\n모든 CRUD 작업 시연이 완료되었습니다.")


def build_catalog_service(db: Database) -> CatalogService:
    return CatalogService(MongoPartRepository(db), MongoCustomerRepository(db), MongoOrderRepository(db))


def main() -> int:
    try:
        with DBConnector() as db:
            run(build_catalog_service(db))
    except (PyMongoError, DuplicateDocumentError) as e:
        print(f"CRUD 작업 중 오류 발생: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
