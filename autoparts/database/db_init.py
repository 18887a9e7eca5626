import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .database import DATA_DIR
from .db_connector import DBConnector
from autoparts.services.exceptions import FixtureLoadError

# 컬렉션별 인덱스 정의: (필드, unique 여부)
COLLECTION_INDEXES: Dict[str, List[Tuple[str, bool]]] = {
    "parts": [
        ("partNumber", True),
        ("category", False),
        ("manufacturer", False),
        ("compatibleCars", False),
    ],
    "customers": [
        ("customerId", True),
        ("email", True),
        ("customerType", False),
        ("address.city", False),
    ],
    "orders": [
        ("orderId", True),
        ("customerId", False),
        ("orderDate", False),
        ("status", False),
        ("items.partNumber", False),
    ],
}


def load_json(filename: str, data_dir: Path = DATA_DIR) -> List[Dict[str, Any]]:
    """
    data 디렉터리의 JSON 픽스처 파일을 읽어 문서 리스트로 반환합니다.

    Raises:
        FixtureLoadError: 파일이 없거나, JSON이 아니거나, 최상위가 배열이 아닐 때.
    """
    path = Path(data_dir) / filename
    try:
        with open(path, "r", encoding="utf-8") as f:
            documents = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FixtureLoadError(f"Failed to load fixture '{path}': {e}") from e

    if not isinstance(documents, list):
        raise FixtureLoadError(f"Fixture '{path}' must contain a JSON array.")
    return documents


def seed_collection(db: Database, name: str, documents: List[Dict[str, Any]]) -> int:
    """
    컬렉션의 기존 데이터를 지우고 documents를 삽입한 뒤, 인덱스를 생성합니다.

    Returns:
        삽입된 문서의 수.
    """
    collection = db[name]
    collection.delete_many({})

    inserted = 0
    if documents:
        inserted = len(collection.insert_many(documents).inserted_ids)

    for field, unique in COLLECTION_INDEXES.get(name, []):
        collection.create_index([(field, ASCENDING)], unique=unique)
    return inserted


def initialize_db(db: Database, data_dir: Path = DATA_DIR) -> Dict[str, int]:
    """
    parts, customers, orders 컬렉션을 픽스처로 초기화합니다.

    Returns:
        컬렉션 이름 -> 삽입된 문서 수.
    """
    print("DB 초기화 중 (JSON 픽스처 사용)...")
    counts = {}
    for name in COLLECTION_INDEXES:
        documents = load_json(f"{name}.json", data_dir)
        counts[name] = seed_collection(db, name, documents)
        print(f"'{name}' 컬렉션: {counts[name]}개 문서 삽입 및 인덱스 생성 완료.")
    print("DB 초기화 및 기본 데이터 삽입 완료.")
    return counts


def main() -> int:
    try:
        with DBConnector() as db:
            initialize_db(db)
    except (PyMongoError, FixtureLoadError) as e:
        print(f"DB 초기화 중 오류 발생: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
