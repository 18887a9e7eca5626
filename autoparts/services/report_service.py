from typing import Any, Dict, List

from autoparts.repositories.interfaces import ICustomerRepository, IOrderRepository, IPartRepository

# 할인(%)을 반영한 주문 항목 한 줄의 매출: quantity * (price - price * discount / 100)
LINE_REVENUE = {
    "$multiply": [
        "$items.quantity",
        {"$subtract": [
            "$items.priceAtPurchase",
            {"$multiply": ["$items.priceAtPurchase", {"$divide": ["$items.discount", 100]}]},
        ]},
    ]
}


def top_selling_parts_pipeline(limit: int = 5) -> List[Dict[str, Any]]:
    """판매 수량 기준 상위 부품. orders 컬렉션에서 실행합니다."""
    return [
        {"$unwind": "$items"},
        {"$group": {
            "_id": "$items.partNumber",
            "totalSold": {"$sum": "$items.quantity"},
            "totalRevenue": {"$sum": LINE_REVENUE},
        }},
        {"$sort": {"totalSold": -1}},
        {"$limit": limit},
        {"$lookup": {"from": "parts", "localField": "_id", "foreignField": "partNumber", "as": "partInfo"}},
        {"$unwind": "$partInfo"},
        {"$project": {
            "_id": 0,
            "partNumber": "$_id",
            "name": "$partInfo.name",
            "manufacturer": "$partInfo.manufacturer",
            "category": "$partInfo.category",
            "totalSold": 1,
            "totalRevenue": {"$round": ["$totalRevenue", 2]},
        }},
    ]


def monthly_sales_by_category_pipeline() -> List[Dict[str, Any]]:
    """연-월, 카테고리별 판매 수량과 매출. orders 컬렉션에서 실행합니다."""
    return [
        {"$unwind": "$items"},
        {"$lookup": {"from": "parts", "localField": "items.partNumber", "foreignField": "partNumber", "as": "partDetails"}},
        {"$unwind": "$partDetails"},
        {"$addFields": {
            "yearMonth": {
                "$dateToString": {"format": "%Y-%m", "date": {"$dateFromString": {"dateString": "$orderDate"}}}
            }
        }},
        {"$group": {
            "_id": {"yearMonth": "$yearMonth", "category": "$partDetails.category"},
            "totalSales": {"$sum": "$items.quantity"},
            "totalRevenue": {"$sum": LINE_REVENUE},
        }},
        {"$sort": {"_id.yearMonth": 1, "_id.category": 1}},
        {"$project": {
            "_id": 0,
            "yearMonth": "$_id.yearMonth",
            "category": "$_id.category",
            "totalSales": 1,
            "totalRevenue": {"$round": ["$totalRevenue", 2]},
        }},
    ]


def customers_by_city_pipeline() -> List[Dict[str, Any]]:
    """도시별 고객 수, 평균 적립 포인트, 소매/도매 고객 수. customers 컬렉션에서 실행합니다."""
    return [
        {"$group": {
            "_id": "$address.city",
            "customerCount": {"$sum": 1},
            "averageLoyaltyPoints": {"$avg": "$loyaltyPoints"},
            "retailers": {"$sum": {"$cond": [{"$eq": ["$customerType", "retail"]}, 1, 0]}},
            "wholesalers": {"$sum": {"$cond": [{"$eq": ["$customerType", "wholesale"]}, 1, 0]}},
        }},
        {"$sort": {"customerCount": -1}},
        {"$project": {
            "_id": 0,
            "city": "$_id",
            "customerCount": 1,
            "averageLoyaltyPoints": {"$round": ["$averageLoyaltyPoints", 0]},
            "retailers": 1,
            "wholesalers": 1,
        }},
    ]


def most_active_customers_pipeline(limit: int = 5) -> List[Dict[str, Any]]:
    """
    결제 금액 합계 기준 상위 고객. customers 컬렉션에서 실행합니다.
    소매 고객은 이름+성, 도매 고객은 회사명을 표시합니다.
    """
    return [
        {"$lookup": {"from": "orders", "localField": "customerId", "foreignField": "customerId", "as": "customerOrders"}},
        {"$addFields": {
            "totalOrders": {"$size": "$customerOrders"},
            "totalSpent": {"$sum": "$customerOrders.payment.amount"},
        }},
        {"$match": {"totalOrders": {"$gt": 0}}},
        {"$sort": {"totalSpent": -1}},
        {"$limit": limit},
        {"$project": {
            "_id": 0,
            "customerId": 1,
            "name": {"$cond": {
                "if": {"$eq": ["$customerType", "retail"]},
                "then": {"$concat": ["$firstName", " ", "$lastName"]},
                "else": "$companyName",
            }},
            "city": "$address.city",
            "customerType": 1,
            "loyaltyPoints": 1,
            "totalOrders": 1,
            "totalSpent": {"$round": ["$totalSpent", 2]},
        }},
    ]


def category_inventory_value_pipeline() -> List[Dict[str, Any]]:
    """카테고리별 부품 수, 평균 가격, 재고 가치(가격 x 수량). parts 컬렉션에서 실행합니다."""
    return [
        {"$group": {
            "_id": "$category",
            "partCount": {"$sum": 1},
            "averagePrice": {"$avg": "$price"},
            "totalInventoryValue": {"$sum": {"$multiply": ["$price", "$stockQuantity"]}},
        }},
        {"$sort": {"totalInventoryValue": -1}},
        {"$project": {
            "_id": 0,
            "category": "$_id",
            "partCount": 1,
            "averagePrice": {"$round": ["$averagePrice", 2]},
            "totalInventoryValue": {"$round": ["$totalInventoryValue", 2]},
        }},
    ]


class ReportService:
    """집계 파이프라인을 각 컬렉션에 실행하여 매장 보고서를 만듭니다."""

    def __init__(self, part_repo: IPartRepository, customer_repo: ICustomerRepository, order_repo: IOrderRepository):
        self.part_repo = part_repo
        self.customer_repo = customer_repo
        self.order_repo = order_repo

    def top_selling_parts(self, limit: int = 5) -> List[Dict[str, Any]]:
        return self.order_repo.aggregate(top_selling_parts_pipeline(limit))

    def monthly_sales_by_category(self) -> List[Dict[str, Any]]:
        return self.order_repo.aggregate(monthly_sales_by_category_pipeline())

    def customers_by_city(self) -> List[Dict[str, Any]]:
        return self.customer_repo.aggregate(customers_by_city_pipeline())

    def most_active_customers(self, limit: int = 5) -> List[Dict[str, Any]]:
        return self.customer_repo.aggregate(most_active_customers_pipeline(limit))

    def category_inventory_value(self) -> List[Dict[str, Any]]:
        return self.part_repo.aggregate(category_inventory_value_pipeline())
