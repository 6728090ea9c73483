from enum import Enum


class BedSize(str, Enum):
    """ベッドのサイズ"""

    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    KING_SIZE = "KING_SIZE"

    @property
    def capacity(self) -> int:
        """就寝可能な人数"""
        if self is BedSize.SINGLE:
            return 1
        return 2
