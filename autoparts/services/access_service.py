from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from autoparts.database import models
from autoparts.database.models import AccessDecision, AccessReason, Operation
from autoparts.repositories.interfaces import IRoleRepository
from autoparts.services.exceptions import RoleTableError, UserDirectoryError

# 판정 사유를 사람이 읽을 수 있는 문장으로 바꿀 때 사용합니다.
REASON_MESSAGES = {
    AccessReason.UNKNOWN_USER: "Unknown user",
    AccessReason.UNKNOWN_ROLE: "Unknown role",
    AccessReason.GRANTED: "Access granted",
    AccessReason.DENIED: "Access denied",
}


class RoleTable:
    """역할 이름 -> Role 매핑. 생성 후에는 읽기만 가능합니다."""

    def __init__(self, roles: Iterable[models.Role]):
        table: Dict[str, models.Role] = {}
        for role in roles:
            if role.name in table:
                raise RoleTableError(f"Role '{role.name}' is defined more than once.")
            table[role.name] = role
        self._roles = MappingProxyType(table)

    @classmethod
    def from_documents(cls, documents: Iterable[Mapping[str, Any]]) -> "RoleTable":
        """MongoDB 'roles' 컬렉션에서 읽어 온 문서들로 테이블을 구성합니다."""
        return cls(models.Role.from_document(doc) for doc in documents)

    def get(self, name: str) -> Optional[models.Role]:
        return self._roles.get(name)

    def names(self) -> List[str]:
        return list(self._roles)

    def __contains__(self, name: object) -> bool:
        return name in self._roles

    def __iter__(self) -> Iterator[models.Role]:
        return iter(self._roles.values())

    def __len__(self) -> int:
        return len(self._roles)


class UserDirectory:
    """사용자 이름 -> User 매핑. 생성 후에는 읽기만 가능합니다."""

    def __init__(self, users: Iterable[models.User]):
        directory: Dict[str, models.User] = {}
        for user in users:
            if user.name in directory:
                raise UserDirectoryError(f"User '{user.name}' is defined more than once.")
            directory[user.name] = user
        self._users = MappingProxyType(directory)

    def get(self, name: str) -> Optional[models.User]:
        return self._users.get(name)

    def names(self) -> List[str]:
        return list(self._users)

    def __contains__(self, name: object) -> bool:
        return name in self._users

    def __iter__(self) -> Iterator[models.User]:
        return iter(self._users.values())

    def __len__(self) -> int:
        return len(self._users)


class AccessChecker:
    """
    (사용자, 리소스, 작업) 조합에 대해 허용/거부를 판정합니다.

    조회 순서는 사용자 -> 역할 -> 권한 매트릭스이며, 어느 단계에서든 조회가
    실패하면 거부(fail-closed)로 판정합니다. 두 테이블 모두 읽기 전용이므로
    여러 스레드에서 동시에 호출해도 별도의 잠금이 필요 없습니다.
    """

    def __init__(self, roles: RoleTable, users: UserDirectory):
        self.roles = roles
        self.users = users

    def check_access(self, username: str, resource: str, operation: Union[Operation, str]) -> AccessDecision:
        """
        접근 권한을 판정합니다. 어떤 입력에 대해서도 예외를 발생시키지 않습니다.

        Args:
            username: 검사할 사용자 이름.
            resource: 대상 리소스(컬렉션) 이름. (예: 'parts')
            operation: 'read', 'write', 'delete' 중 하나 (Operation 또는 문자열).

        Returns:
            AccessDecision. 사용자나 역할을 찾지 못하면 UNKNOWN_USER / UNKNOWN_ROLE,
            매트릭스 값이 정확히 True일 때만 GRANTED, 나머지는 모두 DENIED.
        """
        user = self._lookup(self.users, username)
        if user is None:
            return AccessDecision(False, AccessReason.UNKNOWN_USER)

        role = self._lookup(self.roles, user.role)
        if role is None:
            return AccessDecision(False, AccessReason.UNKNOWN_ROLE)

        if isinstance(operation, Operation):
            operation = operation.value

        operations = self._lookup(role.permissions, resource) or {}
        allowed = self._lookup(operations, operation) is True
        return AccessDecision(allowed, AccessReason.GRANTED if allowed else AccessReason.DENIED)

    def explain(self, decision: AccessDecision) -> str:
        return REASON_MESSAGES[decision.reason]

    @staticmethod
    def _lookup(table, key):
        # 해시할 수 없는 키(list 등)는 '없음'과 동일하게 취급합니다.
        try:
            return table.get(key)
        except (TypeError, AttributeError):
            return None


class AccessControlService:
    """역할 설정을 'roles' 컬렉션에 저장하고, 저장된 내용으로 AccessChecker를 구성합니다."""

    def __init__(self, role_repo: IRoleRepository):
        self.role_repo = role_repo

    def publish_roles(self, roles: Iterable[models.Role]) -> int:
        """
        기존 역할 문서를 모두 지우고 주어진 역할들을 저장합니다.

        Raises:
            RoleTableError: 역할 이름이 중복될 때 (저장 전에 검사).
        """
        table = RoleTable(roles)
        return self.role_repo.replace_all(list(table))

    def load_role_table(self) -> RoleTable:
        return RoleTable(self.role_repo.list_all())

    def build_checker(self, users: UserDirectory) -> AccessChecker:
        """DB에서 역할을 한 번 읽어 와 검사기를 만듭니다. 이후 검사는 DB에 접근하지 않습니다."""
        return AccessChecker(self.load_role_table(), users)


# --------------------------------------------------------------------------
## 자동차 부품 매장의 기본 역할/사용자 구성
# --------------------------------------------------------------------------

def _matrix(read: bool, write: bool, delete: bool) -> Dict[str, bool]:
    return {"read": read, "write": write, "delete": delete}

DEFAULT_ROLES = (
    models.Role("admin", "Administrator with full access", {
        "parts": _matrix(True, True, True),
        "customers": _matrix(True, True, True),
        "orders": _matrix(True, True, True),
    }),
    models.Role("manager", "Store manager", {
        "parts": _matrix(True, True, False),
        "customers": _matrix(True, False, False),
        "orders": _matrix(True, True, False),
    }),
    models.Role("sales", "Sales representative", {
        "parts": _matrix(True, False, False),
        "customers": _matrix(True, True, False),
        "orders": _matrix(True, True, False),
    }),
    models.Role("inventory", "Warehouse keeper", {
        "parts": _matrix(True, True, False),
        "customers": _matrix(False, False, False),
        "orders": _matrix(True, False, False),
    }),
    models.Role("readonly", "Reporting user with read-only access", {
        "parts": _matrix(True, False, False),
        "customers": _matrix(True, False, False),
        "orders": _matrix(True, False, False),
    }),
)

DEFAULT_USERS = (
    models.User("admin_user", "admin", "Administrator with full access"),
    models.User("manager_user", "manager", "Manager handling parts and orders"),
    models.User("sales_user", "sales", "Sales representative processing orders"),
    models.User("inventory_user", "inventory", "Warehouse keeper"),
    models.User("reports_user", "readonly", "Reporting user"),
)


@dataclass(frozen=True)
class AccessProbe:
    """데모에서 순서대로 실행하는 접근 시나리오 하나."""
    username: str
    resource: str
    operation: Operation
    description: str

DEFAULT_ACCESS_PROBES = (
    AccessProbe("admin_user", "parts", Operation.DELETE, "Admin deletes a part"),
    AccessProbe("manager_user", "parts", Operation.WRITE, "Manager edits a part"),
    AccessProbe("manager_user", "parts", Operation.DELETE, "Manager tries to delete a part"),
    AccessProbe("sales_user", "customers", Operation.WRITE, "Sales rep edits a customer"),
    AccessProbe("sales_user", "parts", Operation.WRITE, "Sales rep tries to edit a part"),
    AccessProbe("inventory_user", "parts", Operation.WRITE, "Warehouse keeper updates stock"),
    AccessProbe("inventory_user", "customers", Operation.READ, "Warehouse keeper tries to read a customer"),
    AccessProbe("reports_user", "orders", Operation.READ, "Reporting user views an order"),
    AccessProbe("reports_user", "orders", Operation.WRITE, "Reporting user tries to edit an order"),
)
