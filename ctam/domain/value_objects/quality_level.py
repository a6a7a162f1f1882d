"""
Quality level bands.

The five CTAM+ quality levels and the versioned band tables that map a score
to a level. There is one table per input scale: the composite 0-10 score and
the 0-100 percentage used by quantitative-only and impact views. Tables are
registered by version so that a deployment can pin the bands it reports on.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class QualityLevel:
    """One band of a quality level table; ``[min_score, max_score]`` is closed."""

    level: int
    name_en: str
    name_th: str
    min_score: float
    max_score: float
    description: str = ""

    def contains(self, score: float) -> bool:
        return self.min_score <= score <= self.max_score

    @property
    def label(self) -> str:
        """Report label, e.g. ``ระดับ 3 = พอใช้ (Fair)``."""
        return f"ระดับ {self.level} = {self.name_th} ({self.name_en})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "name_en": self.name_en,
            "name_th": self.name_th,
            "min_score": self.min_score,
            "max_score": self.max_score,
            "description": self.description,
        }


@dataclass(frozen=True)
class QualityLevelTable:
    """
    Ordered set of quality bands over one score scale.

    Levels are stored highest first. Bands are expected to be contiguous at
    the table's one-decimal (or integer) precision.
    """

    version: str
    scale: str
    levels: tuple[QualityLevel, ...]

    def __post_init__(self) -> None:
        if not self.levels:
            raise ValueError(f"Quality table '{self.version}' has no levels")
        ordered = tuple(sorted(self.levels, key=lambda lvl: lvl.level, reverse=True))
        object.__setattr__(self, "levels", ordered)

    @property
    def highest(self) -> QualityLevel:
        return self.levels[0]

    @property
    def lowest(self) -> QualityLevel:
        return self.levels[-1]

    @property
    def min_score(self) -> float:
        return min(lvl.min_score for lvl in self.levels)

    @property
    def max_score(self) -> float:
        return max(lvl.max_score for lvl in self.levels)

    def get(self, level: int) -> QualityLevel:
        for lvl in self.levels:
            if lvl.level == level:
                return lvl
        raise KeyError(f"Quality table '{self.version}' has no level {level}")


_DESCRIPTIONS = {
    5: "Cybersecurity controls are comprehensive and sustained.",
    4: "Most controls are in place with minor gaps.",
    3: "Core controls are in place; several areas need strengthening.",
    2: "Significant gaps; an improvement plan is required.",
    1: "Critical gaps that need urgent remediation.",
}

_NAMES = {
    5: ("Excellent", "ดีเยี่ยม"),
    4: ("Good", "ดี"),
    3: ("Fair", "พอใช้"),
    2: ("Developing", "ต้องพัฒนา"),
    1: ("Critical", "ต้องเร่งแก้ไข"),
}


def _build_levels(ranges: dict[int, tuple[float, float]]) -> tuple[QualityLevel, ...]:
    return tuple(
        QualityLevel(
            level=level,
            name_en=_NAMES[level][0],
            name_th=_NAMES[level][1],
            min_score=low,
            max_score=high,
            description=_DESCRIPTIONS[level],
        )
        for level, (low, high) in ranges.items()
    )


TEN_POINT_TABLE = QualityLevelTable(
    version="ctam-plus-2568",
    scale="ten_point",
    levels=_build_levels(
        {
            5: (8.6, 10.0),
            4: (7.1, 8.5),
            3: (5.6, 7.0),
            2: (4.1, 5.5),
            1: (0.0, 4.0),
        }
    ),
)

PERCENT_TABLE = QualityLevelTable(
    version="ctam-plus-2568-percent",
    scale="percent",
    levels=_build_levels(
        {
            5: (86.0, 100.0),
            4: (71.0, 85.0),
            3: (56.0, 70.0),
            2: (41.0, 55.0),
            1: (0.0, 40.0),
        }
    ),
)

# Ten-point table version -> (ten-point table, percentage table)
QUALITY_TABLES: dict[str, tuple[QualityLevelTable, QualityLevelTable]] = {
    TEN_POINT_TABLE.version: (TEN_POINT_TABLE, PERCENT_TABLE),
}


def get_quality_table(version: str) -> tuple[QualityLevelTable, QualityLevelTable]:
    """Return the ten-point and percentage tables registered under ``version``."""
    try:
        return QUALITY_TABLES[version]
    except KeyError:
        raise ValueError(
            f"Unknown quality table version '{version}'; known: {sorted(QUALITY_TABLES)}"
        ) from None
