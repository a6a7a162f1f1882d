"""Levels of the reporting drill-down."""

from enum import Enum


class AreaLevel(str, Enum):
    COUNTRY = "country"
    REGION = "region"
    PROVINCE = "province"
    UNIT = "unit"

    def __str__(self) -> str:
        return self.value
