"""Threshold bands — convert a usage percentage into a disposition.

Every category owns a band of three cut points:

    ignore   below this the evidence is noise
    confirm  from here up to ``adopt`` the project partially follows the practice
    adopt    at or above this the project follows the practice (closed interval)

Categories without an explicit band use DEFAULT_BAND. Note that the default
band has ``confirm == adopt``, so uncategorized practices have an empty
confirmation zone.

Usage:
    table = ThresholdTable()
    band = table.band_for(Category.CODE_STYLE)
    band.adopts(0.8)      # True
    band.confirms(0.75)   # True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from .models import Category


@dataclass(frozen=True)
class ThresholdBand:
    """Cut points with ``0 <= ignore < confirm <= adopt <= 1``."""

    ignore: float
    confirm: float
    adopt: float

    def __post_init__(self) -> None:
        for name in ("ignore", "confirm", "adopt"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")
        if not self.ignore < self.confirm:
            raise ValueError(
                f"ignore ({self.ignore}) must be strictly below confirm ({self.confirm})"
            )
        if not self.confirm <= self.adopt:
            raise ValueError(f"confirm ({self.confirm}) must not exceed adopt ({self.adopt})")

    def adopts(self, percentage: float) -> bool:
        return percentage >= self.adopt

    def confirms(self, percentage: float) -> bool:
        """Is the percentage inside the half-open confirmation zone [confirm, adopt)?"""
        return self.confirm <= percentage < self.adopt

    def ignores(self, percentage: float) -> bool:
        return percentage < self.ignore

    def to_dict(self) -> dict[str, float]:
        return {"ignore": self.ignore, "confirm": self.confirm, "adopt": self.adopt}


DEFAULT_BAND = ThresholdBand(ignore=0.30, confirm=0.70, adopt=0.70)

CATEGORY_BANDS: Mapping[Category, ThresholdBand] = {
    Category.CODE_STYLE: ThresholdBand(ignore=0.30, confirm=0.70, adopt=0.80),
    # Error handling adopts earlier: partial try/catch coverage is still a convention
    Category.ERROR_HANDLING: ThresholdBand(ignore=0.30, confirm=0.60, adopt=0.60),
    # File organization needs stronger evidence
    Category.ARCHITECTURE: ThresholdBand(ignore=0.30, confirm=0.70, adopt=0.85),
    Category.COMPONENT: ThresholdBand(ignore=0.30, confirm=0.70, adopt=0.75),
}


@dataclass(frozen=True)
class ThresholdTable:
    """Per-category bands with a fallback band."""

    bands: Mapping[Category, ThresholdBand] = field(default_factory=lambda: dict(CATEGORY_BANDS))
    default: ThresholdBand = DEFAULT_BAND

    def band_for(self, category: Category) -> ThresholdBand:
        return self.bands.get(category, self.default)

    def with_overrides(
        self, overrides: Mapping[str, Mapping[str, float]]
    ) -> "ThresholdTable":
        """Return a new table with bands replaced from a ``{category: {cut: value}}`` mapping.

        Missing cut points inherit from the band being replaced. The key
        ``"default"`` replaces the fallback band.

        Raises:
            ValueError: If a resulting band violates ordering or range.
        """
        bands = dict(self.bands)
        default = self.default
        for key, values in overrides.items():
            if key == "default":
                default = _merge_band(default, values)
                continue
            tag = key.strip().lower().replace("_", "-")
            category = Category.parse(tag)
            if category.value != tag:
                raise ValueError(f"Unknown threshold category: {key!r}")
            bands[category] = _merge_band(bands.get(category, default), values)
        return ThresholdTable(bands=bands, default=default)

    def to_dict(self) -> dict[str, dict[str, float]]:
        data = {"default": self.default.to_dict()}
        for category, band in sorted(self.bands.items(), key=lambda kv: kv[0].precedence):
            data[category.value] = band.to_dict()
        return data


def _merge_band(base: Optional[ThresholdBand], values: Mapping[str, float]) -> ThresholdBand:
    unknown = set(values) - {"ignore", "confirm", "adopt"}
    if unknown:
        raise ValueError(f"Unknown threshold keys: {', '.join(sorted(unknown))}")
    base = base or DEFAULT_BAND
    return ThresholdBand(
        ignore=float(values.get("ignore", base.ignore)),
        confirm=float(values.get("confirm", base.confirm)),
        adopt=float(values.get("adopt", base.adopt)),
    )
