from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class ICustomerRepository(ABC):
    @abstractmethod
    def insert(self, customer: Dict[str, Any]) -> Any:
        """새로운 고객 문서를 삽입하고 생성된 _id를 반환합니다."""
        pass

    @abstractmethod
    def find_by_customer_id(self, customer_id: str) -> Optional[Dict[str, Any]]:
        """고객 ID로 특정 고객을 조회합니다."""
        pass

    @abstractmethod
    def update_one(self, customer_id: str, update: Dict[str, Any]) -> int:
        """고객 ID로 고객 하나를 수정하고, 변경된 문서 수를 반환합니다."""
        pass

    @abstractmethod
    def delete_one(self, customer_id: str) -> int:
        """고객 ID로 고객 하나를 삭제하고, 삭제된 문서 수를 반환합니다."""
        pass

    @abstractmethod
    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """customers 컬렉션에 대해 집계 파이프라인을 실행합니다."""
        pass
