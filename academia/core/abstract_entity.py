from datetime import datetime, timezone
from typing import Any, Dict


class AbstractEntity:
    """
    Base class for identified domain objects with:
    - integer ID assigned by the caller
    - created/updated timestamps
    - versioning
    """
    def __init__(self, entity_id: int):
        self._id = entity_id
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> int:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def version(self) -> int:
        return self._version

    def touch(self) -> None:
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"
