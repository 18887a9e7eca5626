import os
from pathlib import Path

from dotenv import load_dotenv
from pymongo import MongoClient

# .env 파일이 있으면 환경 변수로 읽어옵니다. (이미 설정된 값은 덮어쓰지 않음)
load_dotenv()

# MongoDB 연결 문자열과 데이터베이스 이름
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "autoparts_store")

# JSON 픽스처 파일이 들어있는 디렉터리 (기본값: 프로젝트 루트의 data/)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = Path(os.getenv("AUTOPARTS_DATA_DIR", str(PROJECT_ROOT / "data")))


def create_client(uri: str = MONGODB_URI) -> MongoClient:
    """
    MongoClient를 생성합니다.
    실제 연결은 첫 요청 시점에 이루어지므로, 생성 자체는 실패하지 않습니다.
    """
    return MongoClient(uri)
