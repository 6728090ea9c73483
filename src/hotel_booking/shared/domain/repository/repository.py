from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - エンティティの永続化を抽象化する
    - 読み出した値を変更しても保存済みの状態には影響しない
    """

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """読み取りと書き込みをまとめて排他実行するためのコンテキスト"""
        raise NotImplementedError

    @abstractmethod
    def save(self, item: T) -> T:
        """新しい ID を採番して保存し、保存後の値を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T:
        """IDで検索する（存在しない場合は ResourceNotFoundException）"""
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, id: ID) -> bool:
        """IDが存在するかどうか"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> tuple[T, ...]:
        """全件を読み取り専用で返す"""
        raise NotImplementedError

    @abstractmethod
    def replace(self, item: T) -> T:
        """同じ ID の保存済みエンティティを置き換える"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, item: T) -> bool:
        """完全一致するエンティティを削除する"""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, id: ID) -> bool:
        """IDで削除する"""
        raise NotImplementedError

    @abstractmethod
    def delete_all(self) -> None:
        """全件削除する"""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """保存件数を返す"""
        raise NotImplementedError
