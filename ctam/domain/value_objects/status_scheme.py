"""
Item status schemes.

Assessment item sets use either a pass/partial/fail vocabulary or a binary
pass/fail one. The scheme in force is declared by the caller and injected
into the evaluator; it is never guessed from the data.
"""

from dataclasses import dataclass, field
from collections.abc import Mapping
from types import MappingProxyType

from ctam.domain.enums import ItemStatus


@dataclass(frozen=True)
class StatusScheme:
    """
    Named status vocabulary with the score weight of each status.

    Statuses outside the vocabulary weigh 0.
    """

    name: str
    weights: Mapping[ItemStatus, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))

    def weight(self, status: ItemStatus | str) -> float:
        try:
            return self.weights.get(ItemStatus(status), 0.0)
        except ValueError:
            return 0.0

    def supports(self, status: ItemStatus | str) -> bool:
        try:
            return ItemStatus(status) in self.weights
        except ValueError:
            return False

    @property
    def has_partial(self) -> bool:
        return ItemStatus.PARTIAL in self.weights


TERNARY_SCHEME = StatusScheme(
    name="ternary",
    weights={ItemStatus.PASS: 1.0, ItemStatus.PARTIAL: 0.5, ItemStatus.FAIL: 0.0},
)

BINARY_SCHEME = StatusScheme(
    name="binary",
    weights={ItemStatus.PASS: 1.0, ItemStatus.FAIL: 0.0},
)

_SCHEMES = {scheme.name: scheme for scheme in (TERNARY_SCHEME, BINARY_SCHEME)}


def get_status_scheme(name: str) -> StatusScheme:
    """Look up a registered scheme by name (case-insensitive)."""
    try:
        return _SCHEMES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown item status scheme: {name}") from None
