from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class IPartRepository(ABC):
    @abstractmethod
    def insert(self, part: Dict[str, Any]) -> Any:
        """새로운 부품 문서를 삽입하고 생성된 _id를 반환합니다."""
        pass

    @abstractmethod
    def find_by_part_number(self, part_number: str) -> Optional[Dict[str, Any]]:
        """부품 번호로 특정 부품을 조회합니다."""
        pass

    @abstractmethod
    def find(self, query: Dict[str, Any], sort: Optional[List[tuple]] = None, limit: int = 0) -> List[Dict[str, Any]]:
        """조건에 맞는 부품 목록을 조회합니다. sort는 (필드, 방향) 튜플의 리스트입니다."""
        pass

    @abstractmethod
    def count(self, query: Dict[str, Any]) -> int:
        """조건에 맞는 부품의 개수를 조회합니다."""
        pass

    @abstractmethod
    def update_one(self, part_number: str, update: Dict[str, Any]) -> int:
        """부품 번호로 부품 하나를 수정하고, 변경된 문서 수를 반환합니다."""
        pass

    @abstractmethod
    def update_many(self, query: Dict[str, Any], update: Dict[str, Any]) -> int:
        """조건에 맞는 모든 부품을 수정하고, 변경된 문서 수를 반환합니다."""
        pass

    @abstractmethod
    def delete_one(self, part_number: str) -> int:
        """부품 번호로 부품 하나를 삭제하고, 삭제된 문서 수를 반환합니다."""
        pass

    @abstractmethod
    def delete_many(self, query: Dict[str, Any]) -> int:
        """조건에 맞는 모든 부품을 삭제하고, 삭제된 문서 수를 반환합니다."""
        pass

    @abstractmethod
    def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """parts 컬렉션에 대해 집계 파이프라인을 실행합니다."""
        pass
