from dataclasses import dataclass, field


@dataclass(frozen=True)
class Entity:
    """Entity 基底クラス

    - 不変の値として扱う（更新は新しいインスタンスへの置き換え）
    - ID はリポジトリが採番するため、保存前は None
    """

    id: int | None = field(default=None, kw_only=True)
