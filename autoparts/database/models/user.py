from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    매장 시스템을 사용하는 직원 계정입니다.
    각 사용자는 정확히 하나의 역할(Role)을 이름으로 참조하며,
    실행 시작 시 정의된 뒤로는 변경되지 않습니다.
    """
    name: str
    role: str
    description: str = ""
