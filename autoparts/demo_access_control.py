import sys
from typing import Iterable, List

from pymongo.errors import PyMongoError

from autoparts.database.db_connector import DBConnector
from autoparts.repositories.interfaces import ISalesOrderRepository
from autoparts.repositories.mongo import MongoRoleRepository, MongoSalesOrderRepository
from autoparts.services.access_service import (
    DEFAULT_ACCESS_PROBES, DEFAULT_ROLES, DEFAULT_USERS,
    AccessChecker, AccessControlService, AccessProbe, UserDirectory,
)
from autoparts.services.exceptions import RoleTableError, UserDirectoryError
from autoparts.utils.console import section

# 판매 담당자별로 조회 범위가 달라지는 것을 보여주기 위한 주문
SAMPLE_SALES_ORDERS = (
    {"orderId": "SO-001", "customerId": "C001", "amount": 150.5, "status": "Completed", "createdBy": "sales_user1"},
    {"orderId": "SO-002", "customerId": "C002", "amount": 285.75, "status": "Completed", "createdBy": "sales_user2"},
    {"orderId": "SO-003", "customerId": "C003", "amount": 99.9, "status": "Pending", "createdBy": "sales_user1"},
)


def format_role(role) -> List[str]:
    lines = [f"역할: {role.name} ({role.description})", "  권한:"]
    for resource, operations in role.permissions.items():
        flags = ", ".join(f"{op}:{'yes' if allowed else 'no'}" for op, allowed in operations.items())
        lines.append(f"    {resource}: {flags}")
    return lines


def format_probe(checker: AccessChecker, probe: AccessProbe) -> str:
    decision = checker.check_access(probe.username, probe.resource, probe.operation)
    verdict = "ALLOWED" if decision.has_access else "DENIED"
    return f"{probe.description}: {verdict} - {checker.explain(decision)}"


def show_row_level_filtering(sales_order_repo: ISalesOrderRepository) -> None:
    """createdBy 필드로 판매 주문을 필터링하는 일반 쿼리입니다. AccessChecker와는 무관합니다."""
    inserted = sales_order_repo.replace_all(list(SAMPLE_SALES_ORDERS))
    print(f"판매 담당자 정보가 포함된 샘플 주문 {inserted}건 삽입")

    for seller in ("sales_user1", "sales_user2", None):
        orders = sales_order_repo.list_visible_to(seller)
        who = seller or "admin"
        print(f"{who}: {len(orders)}건 조회 ({', '.join(o['orderId'] for o in orders)})")


def run(access_service: AccessControlService, sales_order_repo: ISalesOrderRepository,
        users: Iterable = DEFAULT_USERS, probes: Iterable[AccessProbe] = DEFAULT_ACCESS_PROBES) -> None:
    print("===== 역할 기반 접근 제어(RBAC) 데모 =====")

    section("1. 사용자 구성")
    directory = UserDirectory(users)
    for user in directory:
        print(f"사용자: {user.name} ({user.description}) -> {user.role}")

    section("2. 역할 구성")
    print(f"'roles' 컬렉션에 역할 {access_service.publish_roles(DEFAULT_ROLES)}개 저장")
    checker = access_service.build_checker(directory)
    for role in checker.roles:
        print("\n".join(format_role(role)))

    section("3. 역할에 따른 접근 검사")
    for probe in probes:
        print(format_probe(checker, probe))

    section("4. 문서 단위 필터링 (Row-Level Security 예시)")
    try:
        show_row_level_filtering(sales_order_repo)
    except PyMongoError as e:
        # 이 부분이 실패해도 앞선 RBAC 시연 결과는 유효합니다.
        print(f"Row-Level Security 시연 중 오류 발생: {e}", file=sys.stderr)

    print("\n접근 제어 시연이 완료되었습니다.")


def main() -> int:
    try:
        with DBConnector() as db:
            run(AccessControlService(MongoRoleRepository(db)), MongoSalesOrderRepository(db))
    except (PyMongoError, RoleTableError, UserDirectoryError) as e:
        print(f"접근 제어 시연 중 오류 발생: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
