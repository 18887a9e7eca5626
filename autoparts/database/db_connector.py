# autoparts/database/db_connector.py
from pymongo import MongoClient
from pymongo.database import Database

from .database import create_client, MONGODB_URI, DB_NAME


class DBConnector:
    """MongoDB 연결을 관리하는 Context Manager"""
    def __init__(self, uri: str = MONGODB_URI, db_name: str = DB_NAME):
        self.uri = uri
        self.db_name = db_name
        self.client: MongoClient = None

    def __enter__(self) -> Database:
        # with 블록 시작 시 연결하고, ping으로 서버 응답을 확인
        self.client = create_client(self.uri)
        try:
            self.client.admin.command("ping")
        except Exception:
            # __enter__에서 실패하면 __exit__가 호출되지 않으므로 여기서 정리
            self.client.close()
            self.client = None
            raise
        print("MongoDB에 성공적으로 연결되었습니다.")
        return self.client[self.db_name]

    def __exit__(self, exc_type, exc_val, exc_tb):
        # with 블록 종료 시 (예외 발생 여부와 상관없이) 연결 해제
        if self.client:
            self.client.close()
            print("MongoDB 연결이 종료되었습니다.")

# 사용 예시:
# with DBConnector() as db:
#     parts = db["parts"].find({"category": "Filters"})
