"""CTAM+ assessment category entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Category:
    """
    One of the fixed CTAM+ criteria (17 per assessment cycle).

    Categories are defined by configuration; the library only reads them.
    """

    id: str
    code: str
    order_number: int
    name_th: str
    name_en: str
    max_score: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "code": self.code,
            "order_number": self.order_number,
            "name_th": self.name_th,
            "name_en": self.name_en,
            "max_score": self.max_score,
        }
