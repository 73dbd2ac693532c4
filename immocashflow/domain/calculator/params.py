"""Engine-wide assumptions and their fallbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from immocashflow.domain.models.investment import Zone

if TYPE_CHECKING:
    from immocashflow.core.settings import AppSettings


@dataclass(frozen=True)
class EngineParams:
    """Defaults applied when optional inputs are missing."""

    default_tmi_pct: float = 30.0
    social_contributions_pct: float = 17.2
    subsidy_fallback_amount: float = 30000.0
    default_zone: Zone = Zone.B1
    default_vacancy_months: float = 1.0

    @classmethod
    def from_settings(cls, settings: AppSettings) -> EngineParams:
        try:
            zone = Zone(settings.default_zone.upper())
        except ValueError:
            zone = Zone.B1
        return cls(
            default_tmi_pct=settings.default_tmi_pct,
            social_contributions_pct=settings.social_contributions_pct,
            subsidy_fallback_amount=settings.subsidy_fallback_amount,
            default_zone=zone,
            default_vacancy_months=settings.default_vacancy_months,
        )


DEFAULT_PARAMS = EngineParams()
