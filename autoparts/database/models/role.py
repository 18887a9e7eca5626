from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

from autoparts.services.exceptions import RoleTableError

_EMPTY = MappingProxyType({})


@dataclass(frozen=True)
class Role:
    """
    리소스(컬렉션)별로 허용되는 작업을 묶어 놓은 권한의 집합입니다.
    (예: 'admin', 'sales').
    permissions는 {리소스: {작업: bool}} 형태이며, 생성 후에는 읽기 전용입니다.
    MongoDB의 'roles' 컬렉션 문서 하나에 해당합니다.
    """
    name: str
    description: str = ""
    permissions: Mapping[str, Mapping[str, bool]] = field(default_factory=dict)

    def __post_init__(self):
        # 바깥 dict가 나중에 바뀌어도 영향을 받지 않도록 복사 후 읽기 전용으로 감쌉니다.
        # 매핑이 아닌 항목(null, true, "rw" 등)은 빈 권한으로 바꿔 거부되도록 합니다.
        permissions = self.permissions if isinstance(self.permissions, Mapping) else {}
        frozen = {
            resource: MappingProxyType(dict(operations)) if isinstance(operations, Mapping) else _EMPTY
            for resource, operations in permissions.items()
        }
        object.__setattr__(self, "permissions", MappingProxyType(frozen))

    def to_document(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "permissions": {
                resource: dict(operations)
                for resource, operations in self.permissions.items()
            },
        }

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Role":
        """
        'roles' 컬렉션 문서로 Role을 만듭니다.

        Raises:
            RoleTableError: name이 없거나 문자열이 아닐 때.
        """
        name = document.get("name")
        if not isinstance(name, str):
            raise RoleTableError(f"Role document {document.get('_id')!r} has no valid 'name'.")
        return cls(
            name=name,
            description=document.get("description", ""),
            permissions=document.get("permissions") or {},
        )
