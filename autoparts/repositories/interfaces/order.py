from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class IOrderRepository(ABC):
    @abstractmethod
    def insert(self, order: Dict[str, Any]) -> Any:
        """새로운 주문 문서를 삽입하고 생성된 _id를 반환합니다."""
        pass

    @abstractmethod
    def find_by_order_id(self, order_id: str) -> Optional[Dict[str, Any]]:
        """주문 ID로 특정 주문을 조회합니다."""
        pass

    @abstractmethod
    def update_one(self, order_id: str, update: Dict[str, Any]) -> int:
        """주문 ID로 주문 하나를 수정하고, 변경된 문서 수를 반환합니다."""
        pass

    @abstractmethod
    def delete_one(self, order_id: str) -> int:
        """주문 ID로 주문 하나를 삭제하고, 삭제된 문서 수를 반환합니다."""
        pass

    @abstractmethod
    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """orders 컬렉션에 대해 집계 파이프라인을 실행합니다."""
        pass
