"""
Repository Errors
"""


class RepositoryError(Exception):
    """Repository 레이어 예외의 기반 클래스"""


class NotFoundError(RepositoryError):
    """단건 조회 결과가 없음"""

    def __init__(self, entity: str, key: int):
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class PersistenceError(RepositoryError):
    """쓰기 트랜잭션 중 DB 오류 (rollback 이후 전달)"""
