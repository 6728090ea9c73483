import dataclasses
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from hotel_booking.shared.domain import Entity, Repository, ResourceNotFoundException

E = TypeVar("E", bound=Entity)


class InMemoryRepository(Repository[E, int]):
    """プロセス内のリストを使用した Repository の具象実装

    - ID は現在の最大 ID + 1（空なら 1）を採番する
    - エンティティは不変なので、保存・読み出しで状態が共有されることはない
    - 全操作はリポジトリごとのロックの内側で実行される
    """

    def __init__(self, entity_name: str = "Item") -> None:
        self._entity_name = entity_name
        self._items: list[E] = []
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            yield

    def save(self, item: E) -> E:
        with self._lock:
            stored = dataclasses.replace(item, id=self._next_id())
            self._items.append(stored)
            return stored

    def find_by_id(self, id: int) -> E:
        with self._lock:
            for item in self._items:
                if item.id == id:
                    return item
        raise ResourceNotFoundException(
            f"{self._entity_name} with id {id} was not found"
        )

    def exists_by_id(self, id: int) -> bool:
        with self._lock:
            return any(item.id == id for item in self._items)

    def find_all(self) -> tuple[E, ...]:
        with self._lock:
            return tuple(self._items)

    def replace(self, item: E) -> E:
        with self._lock:
            for index, stored in enumerate(self._items):
                if stored.id == item.id:
                    self._items[index] = item
                    return item
        raise ResourceNotFoundException(
            f"{self._entity_name} with id {item.id} was not found"
        )

    def delete(self, item: E) -> bool:
        with self._lock:
            try:
                self._items.remove(item)
            except ValueError:
                return False
            return True

    def delete_by_id(self, id: int) -> bool:
        with self._lock:
            for stored in self._items:
                if stored.id == id:
                    self._items.remove(stored)
                    return True
            return False

    def delete_all(self) -> None:
        with self._lock:
            self._items.clear()

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def _next_id(self) -> int:
        if not self._items:
            return 1
        return max(item.id for item in self._items if item.id is not None) + 1
