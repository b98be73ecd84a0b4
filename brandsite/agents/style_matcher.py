"""Pick a style preset from the client's own description of what they want."""
from typing import Optional, Tuple

from brandsite.app.catalog import Catalog, DEFAULT_CATALOG
from brandsite.app.models import StylePreset


class StylePresetMatcher:
    """Keyword scoring over the catalog's style presets."""

    def __init__(self, catalog: Catalog = DEFAULT_CATALOG):
        self.catalog = catalog

    @staticmethod
    def score(preset: StylePreset, text: str) -> int:
        """Sum of the lengths of every preset keyword found in the text."""
        lower = (text or '').lower()
        return sum(len(keyword) for keyword in preset.keywords if keyword.lower() in lower)

    def best_match(self, preferences: Optional[str]) -> Tuple[Optional[StylePreset], int]:
        """Highest scoring preset and its score; earlier presets win ties."""
        if not preferences or not preferences.strip():
            return None, 0

        best, best_score = None, 0
        for preset in self.catalog.presets.values():
            score = self.score(preset, preferences)
            if score > best_score:
                best, best_score = preset, score
        return best, best_score

    def match(self, preferences: Optional[str], category: str) -> StylePreset:
        """Best matching preset, or the category default when nothing scores."""
        preset, _ = self.best_match(preferences)
        return preset or self.catalog.default_preset(category)
