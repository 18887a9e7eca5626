from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class ISalesOrderRepository(ABC):
    @abstractmethod
    def replace_all(self, orders: List[Dict[str, Any]]) -> int:
        """기존 판매 주문을 모두 지우고 주어진 주문들로 교체합니다. 삽입된 개수를 반환합니다."""
        pass

    @abstractmethod
    def list_visible_to(self, created_by: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        특정 판매 담당자가 생성한 주문만 조회합니다.

        Args:
            created_by: 주문을 생성한 사용자 이름. None이면 모든 주문을 조회합니다.
        """
        pass
