"""Area scope value object."""

from collections.abc import Iterable
from dataclasses import dataclass

from ctam.domain.enums import AreaLevel


@dataclass(frozen=True)
class AreaScope:
    """
    A named set of units aggregated together (a province, a region, the country).

    ``unit_ids`` is pre-filtered by the caller for role-based visibility.
    """

    area_id: str
    name: str
    level: AreaLevel
    unit_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.unit_ids, tuple):
            object.__setattr__(self, "unit_ids", tuple(self.unit_ids))

    @property
    def size(self) -> int:
        return len(self.unit_ids)

    @classmethod
    def merge(
        cls, area_id: str, name: str, level: AreaLevel, scopes: Iterable["AreaScope"]
    ) -> "AreaScope":
        """Union of child scopes, keeping first-seen order and dropping repeats."""
        seen: dict[str, None] = {}
        for scope in scopes:
            for unit_id in scope.unit_ids:
                seen.setdefault(unit_id, None)
        return cls(area_id=area_id, name=name, level=level, unit_ids=tuple(seen))
