from typing import Any

from bson import json_util


def to_json(value: Any) -> str:
    """
    MongoDB 문서를 보기 좋은 JSON 문자열로 변환합니다.
    ObjectId, datetime 등 BSON 전용 타입도 json_util이 처리합니다.
    """
    return json_util.dumps(value, indent=2, ensure_ascii=False)


def section(title: str) -> None:
    print(f"\n----- {title} -----")
