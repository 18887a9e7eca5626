from abc import ABC, abstractmethod
from typing import List
from autoparts.database import models


class IRoleRepository(ABC):
    @abstractmethod
    def replace_all(self, roles: List[models.Role]) -> int:
        """기존 역할을 모두 지우고 주어진 역할들로 교체합니다. 삽입된 개수를 반환합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[models.Role]:
        """모든 역할의 목록을 조회합니다."""
        pass
