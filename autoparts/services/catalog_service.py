import re
from typing import Any, Dict, List

from pymongo.errors import DuplicateKeyError

from autoparts.repositories.interfaces import ICustomerRepository, IOrderRepository, IPartRepository
from autoparts.services.exceptions import (
    CustomerNotFoundError, DuplicateDocumentError, OrderNotFoundError, PartNotFoundError
)


class CatalogService:
    """부품, 고객, 주문 컬렉션에 대한 기본 CRUD 작업을 제공합니다."""

    def __init__(self, part_repo: IPartRepository, customer_repo: ICustomerRepository, order_repo: IOrderRepository):
        """
        CatalogService를 초기화합니다.

        Args:
            part_repo: 부품 데이터에 접근하기 위한 리포지토리.
            customer_repo: 고객 데이터에 접근하기 위한 리포지토리.
            order_repo: 주문 데이터에 접근하기 위한 리포지토리.
        """
        self.part_repo = part_repo
        self.customer_repo = customer_repo
        self.order_repo = order_repo

    # ---------------------------------------------------------------- CREATE

    def create_part(self, part: Dict[str, Any]) -> Any:
        """
        새로운 부품을 등록합니다.

        Returns:
            MongoDB가 부여한 문서의 _id.

        Raises:
            DuplicateDocumentError: 동일한 부품 번호가 이미 존재할 때.
        """
        try:
            return self.part_repo.insert(part)
        except DuplicateKeyError as e:
            raise DuplicateDocumentError(f"Part '{part.get('partNumber')}' already exists.") from e

    def create_customer(self, customer: Dict[str, Any]) -> Any:
        """
        새로운 고객을 등록합니다.

        Raises:
            DuplicateDocumentError: 동일한 고객 ID 또는 이메일이 이미 존재할 때.
        """
        try:
            return self.customer_repo.insert(customer)
        except DuplicateKeyError as e:
            raise DuplicateDocumentError(f"Customer '{customer.get('customerId')}' already exists.") from e

    def create_order(self, order: Dict[str, Any]) -> Any:
        """
        새로운 주문을 등록합니다.

        Raises:
            DuplicateDocumentError: 동일한 주문 ID가 이미 존재할 때.
        """
        try:
            return self.order_repo.insert(order)
        except DuplicateKeyError as e:
            raise DuplicateDocumentError(f"Order '{order.get('orderId')}' already exists.") from e

    # ------------------------------------------------------------------ READ

    def get_part(self, part_number: str) -> Dict[str, Any]:
        """
        부품 번호로 부품을 조회합니다.

        Raises:
            PartNotFoundError: 해당 번호의 부품을 찾을 수 없을 때.
        """
        part = self.part_repo.find_by_part_number(part_number)
        if not part:
            raise PartNotFoundError(f"Part '{part_number}' not found.")
        return part

    def get_customer(self, customer_id: str) -> Dict[str, Any]:
        customer = self.customer_repo.find_by_customer_id(customer_id)
        if not customer:
            raise CustomerNotFoundError(f"Customer '{customer_id}' not found.")
        return customer

    def get_order(self, order_id: str) -> Dict[str, Any]:
        order = self.order_repo.find_by_order_id(order_id)
        if not order:
            raise OrderNotFoundError(f"Order '{order_id}' not found.")
        return order

    def find_parts_by_category(self, category: str, min_price: float = 0) -> List[Dict[str, Any]]:
        """카테고리가 일치하고 가격이 min_price 이상인 부품을 조회합니다."""
        return self.part_repo.find({"category": category, "price": {"$gte": min_price}})

    def find_parts_compatible_with(self, make: str) -> List[Dict[str, Any]]:
        """특정 자동차 제조사와 호환되는 부품을 조회합니다."""
        return self.part_repo.find({"compatibleCars": {"$in": [make]}})

    def search_parts_by_name(self, text: str) -> List[Dict[str, Any]]:
        """이름에 text가 포함된 부품을 대소문자 구분 없이 조회합니다."""
        return self.part_repo.find({"name": {"$regex": re.escape(text), "$options": "i"}})

    def cheapest_parts(self, limit: int = 5) -> List[Dict[str, Any]]:
        """가격이 낮은 순으로 부품의 이름과 가격만 반환합니다."""
        parts = self.part_repo.find({}, sort=[("price", 1)], limit=limit)
        return [{"name": p.get("name"), "price": p.get("price")} for p in parts]

    # ---------------------------------------------------------------- UPDATE

    def update_part_price(self, part_number: str, price: float) -> int:
        return self.part_repo.update_one(part_number, {"$set": {"price": price}})

    def add_loyalty_points(self, customer_id: str, points: int) -> int:
        return self.customer_repo.update_one(customer_id, {"$inc": {"loyaltyPoints": points}})

    def ship_order(self, order_id: str, tracking_number: str) -> int:
        """주문 상태를 'Shipped'로 바꾸고 배송 추적 번호를 기록합니다."""
        return self.order_repo.update_one(order_id, {
            "$set": {"status": "Shipped", "shipping.trackingNumber": tracking_number}
        })

    def raise_manufacturer_prices(self, manufacturer: str, percent: float) -> int:
        """
        특정 제조사의 모든 부품 가격을 percent(%)만큼 인상합니다.

        Returns:
            변경된 부품 문서의 수.
        """
        factor = 1 + percent / 100
        return self.part_repo.update_many({"manufacturer": manufacturer}, {"$mul": {"price": factor}})

    def add_compatible_car(self, part_number: str, make: str) -> int:
        return self.part_repo.update_one(part_number, {"$push": {"compatibleCars": make}})

    # ---------------------------------------------------------------- DELETE

    def delete_part(self, part_number: str) -> int:
        return self.part_repo.delete_one(part_number)

    def delete_order(self, order_id: str) -> int:
        return self.order_repo.delete_one(order_id)

    def delete_customer(self, customer_id: str) -> int:
        return self.customer_repo.delete_one(customer_id)

    def count_out_of_stock_parts(self) -> int:
        return self.part_repo.count({"stockQuantity": 0})

    def purge_out_of_stock_parts(self) -> int:
        """재고 수량이 0인 부품을 모두 삭제하고, 삭제된 수를 반환합니다."""
        return self.part_repo.delete_many({"stockQuantity": 0})
