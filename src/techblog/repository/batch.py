"""
Keyed Batch Loader

부모 키 집합에 대한 자식 행을 한 번의 조회로 가져와
부모 키별 리스트로 분배
"""
from collections import defaultdict
from typing import Callable, Dict, Generic, Iterable, List, Sequence, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class KeyedBatchLoader(Generic[K, V]):
    """
    키 단위 일괄 로더

    fetch는 키 목록을 받아 (부모 키, 값) 쌍을 반환하는 단일 조회 함수.
    """

    def __init__(self, fetch: Callable[[Sequence[K]], Iterable[Tuple[K, V]]]):
        self.fetch = fetch

    def load(self, keys: Iterable[K]) -> Dict[K, List[V]]:
        """
        키별 값 리스트 조회

        Args:
            keys: 부모 키 목록 (중복 허용)

        Returns:
            요청한 모든 키를 포함하는 매핑 (값이 없으면 빈 리스트)
        """
        unique_keys = list(dict.fromkeys(keys))
        if not unique_keys:
            return {}

        grouped: Dict[K, List[V]] = defaultdict(list)
        for key, value in self.fetch(unique_keys):
            grouped[key].append(value)

        return {key: list(grouped.get(key, [])) for key in unique_keys}
