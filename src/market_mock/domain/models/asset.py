"""Asset domain model."""

from dataclasses import dataclass

from market_mock.domain.models.enums import AssetType


@dataclass(frozen=True)
class Asset:
    """A tradable asset. Prices reference it by name, positions by id."""

    id: str
    name: str
    type: AssetType

    def __post_init__(self) -> None:
        if isinstance(self.type, str):
            object.__setattr__(self, "type", AssetType(self.type))
