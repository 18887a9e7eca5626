from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    """권한을 부여하는 최소 단위의 작업입니다."""
    READ = "read"
    WRITE = "write"
    DELETE = "delete"


class AccessReason(str, Enum):
    """
    접근 판정의 사유 코드입니다.
    UNKNOWN_USER, UNKNOWN_ROLE은 설정 조회 실패, GRANTED, DENIED는 정책 결과입니다.
    """
    UNKNOWN_USER = "unknown_user"
    UNKNOWN_ROLE = "unknown_role"
    GRANTED = "granted"
    DENIED = "denied"


@dataclass(frozen=True)
class AccessDecision:
    """접근 검사 결과. 저장되지 않는 순수 파생 값입니다."""
    has_access: bool
    reason: AccessReason
