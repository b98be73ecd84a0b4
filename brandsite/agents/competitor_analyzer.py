"""Aggregate markup signals across competitor websites."""
from collections import Counter
from typing import Iterable, List, Optional
from urllib.parse import urlparse

from brandsite.agents.markup_analyzer import MarkupSignalExtractor
from brandsite.agents.tools import SearchTool
from brandsite.app.logger import logger
from brandsite.app.models import CompetitorPatternSet, MarkupSignalSet

SOCIAL_DOMAINS = (
    'facebook.com', 'instagram.com', 'tiktok.com', 'linkedin.com',
    'twitter.com', 'x.com', 'youtube.com', 'pinterest.com',
)
MAX_COMPETITORS = 5
TOP_COLORS = 5
TOP_FONTS = 3
TOP_TRUST_SIGNALS = 6


def is_social_url(url: str) -> bool:
    host = urlparse(url if '//' in url else f'https://{url}').netloc.lower()
    return any(host == domain or host.endswith('.' + domain) for domain in SOCIAL_DOMAINS)


def rank_by_frequency(values: Iterable[str], limit: int) -> List[str]:
    """Most frequent values, compared case-insensitively.

    Ties keep first-seen order and each value keeps the casing it was first
    seen with.
    """
    counts = Counter()
    display = {}
    for value in values:
        if not value:
            continue
        key = value.lower()
        counts[key] += 1
        display.setdefault(key, value)
    return [display[key] for key, _ in counts.most_common(limit)]


def most_common(values: Iterable[str], default: str) -> str:
    ranked = rank_by_frequency(values, 1)
    return ranked[0] if ranked else default


def _pages_mentioning(phrase: str, analyses: List[MarkupSignalSet]) -> int:
    phrase = phrase.lower()
    return sum(1 for a in analyses if phrase in (s.lower() for s in a.content.trust_signals))


def summarize_competitors(analyses: List[MarkupSignalSet]) -> Optional[CompetitorPatternSet]:
    """Frequency summary of the analysed pages, None if there are none."""
    if not analyses:
        return None

    hero_style = most_common((a.layout.hero_style for a in analyses), 'minimal')
    nav_style = most_common((a.layout.nav_style for a in analyses), 'static')
    trust_signals = rank_by_frequency((s for a in analyses for s in a.content.trust_signals), TOP_TRUST_SIGNALS)

    insights = []
    if len(analyses) > 2:
        insights.append(f"Analyzed {len(analyses)} competitor websites")
    if len(analyses) >= 2:
        insights.append(f"Most competitors use a {hero_style} hero and {nav_style} navigation")
        shared = [s for s in trust_signals if _pages_mentioning(s, analyses) > 1]
        if shared:
            insights.append(f"Common trust signals: {', '.join(shared)}")

    return CompetitorPatternSet(
        colors=rank_by_frequency((c for a in analyses for c in a.colors.palette), TOP_COLORS),
        fonts=rank_by_frequency((f for a in analyses for f in a.fonts.detected), TOP_FONTS),
        layout_style=most_common((a.layout.style for a in analyses), 'modern'),
        hero_style=hero_style,
        nav_style=nav_style,
        trust_signals=trust_signals,
        insights=insights,
        analyzed_count=len(analyses),
        analyzed_urls=[a.url for a in analyses],
    )


class CompetitorAggregator:
    """Find competitor sites and summarise what they have in common."""

    def __init__(self, extractor: MarkupSignalExtractor = None, search_tool: SearchTool = None):
        self.extractor = extractor or MarkupSignalExtractor()
        self.search_tool = search_tool or SearchTool()

    def find_competitors(self, category: str, location: str) -> List[str]:
        if not self.search_tool.enabled:
            logger.info("No SERP_API_KEY configured, skipping competitor search")
            return []
        region = self.search_tool.settings.search_region
        query = ' '.join(part for part in (category, location, region) if part)
        logger.info(f"Searching competitors: {query}")
        return [result['link'] for result in self.search_tool.search(query, num_results=MAX_COMPETITORS * 2)]

    def aggregate(self, category: str, location: str, urls: List[str] = None) -> Optional[CompetitorPatternSet]:
        """Pattern summary of up to five competitor sites, or None."""
        candidates = list(urls) if urls else self.find_competitors(category, location)
        targets = [url for url in candidates if url and not is_social_url(url)][:MAX_COMPETITORS]
        if not targets:
            return None

        # Sites are analysed one at a time
        analyses = []
        for url in targets:
            analysis = self.extractor.analyze(url)
            if analysis is not None:
                analyses.append(analysis)

        patterns = summarize_competitors(analyses)
        if patterns is None:
            logger.warning(f"⚠ None of {len(targets)} competitor sites could be analyzed")
        else:
            logger.info(f"✓ Competitor patterns from {patterns.analyzed_count}/{len(targets)} sites")
        return patterns
