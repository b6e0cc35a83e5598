"""Color palette for the quiz runner."""

from __future__ import annotations

from dataclasses import dataclass

from quiz_runner.core.models import ScoreBand


@dataclass(frozen=True)
class ToneColors:
    """Foreground/background pair for a status tone."""
    text: str
    background: str


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = "#111827"      # Near black
    TEXT_SECONDARY = "#4B5563"    # Gray
    BACKGROUND_PRIMARY = "#EEF2FF"  # Indigo tint
    CARD_BACKGROUND = "#FFFFFF"
    CARD_MUTED = "#F9FAFB"
    BORDER_PRIMARY = "#D1D5DB"

    ACCENT_PRIMARY = "#2563EB"    # Blue
    ACCENT_TEXT = "#FFFFFF"

    SUCCESS = ToneColors(text="#16A34A", background="#F0FDF4")
    WARNING = ToneColors(text="#CA8A04", background="#FEFCE8")
    ERROR = ToneColors(text="#DC2626", background="#FEF2F2")
    INFO = ToneColors(text="#2563EB", background="#EFF6FF")

    @classmethod
    def for_score_band(cls, band: ScoreBand) -> ToneColors:
        if band is ScoreBand.HIGH:
            return cls.SUCCESS
        if band is ScoreBand.MEDIUM:
            return cls.WARNING
        return cls.ERROR
