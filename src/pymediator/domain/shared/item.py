from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Item:
    """Catalogue item identified by its unique name"""
    name: str
    item_id: Optional[int] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("name cannot be empty")
        object.__setattr__(self, 'name', self.name.strip())

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring match; an empty keyword matches everything"""
        return keyword.strip().lower() in self.name.lower()
