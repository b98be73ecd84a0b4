"""Run every extractor for a business and fuse the results."""
import asyncio
from typing import Any, Optional, Tuple

from brandsite.agents.brand_fusion import BrandProfileFusionEngine
from brandsite.agents.competitor_analyzer import CompetitorAggregator
from brandsite.agents.markup_analyzer import MarkupSignalExtractor
from brandsite.agents.site_generator import SiteGenerator
from brandsite.agents.social_analyzer import SocialSignalExtractor
from brandsite.agents.tools import PageFetcher, SearchTool, SocialDataClient
from brandsite.app.catalog import Catalog, DEFAULT_CATALOG
from brandsite.app.config import Settings, get_settings
from brandsite.app.logger import logger
from brandsite.app.models import BrandProfile, GenerationArtifact, RawExtractionInput


class BrandOrchestrator:
    """Concurrent extraction followed by priority fusion."""

    def __init__(
        self,
        settings: Settings = None,
        catalog: Catalog = DEFAULT_CATALOG,
        markup_extractor: MarkupSignalExtractor = None,
        social_extractor: SocialSignalExtractor = None,
        competitor_aggregator: CompetitorAggregator = None,
        fusion_engine: BrandProfileFusionEngine = None,
    ):
        self.settings = settings or get_settings()
        self.markup_extractor = markup_extractor or MarkupSignalExtractor(PageFetcher(self.settings))
        self.social_extractor = social_extractor or SocialSignalExtractor(SocialDataClient(self.settings))
        self.competitor_aggregator = competitor_aggregator or CompetitorAggregator(
            MarkupSignalExtractor(PageFetcher(self.settings)),
            SearchTool(self.settings),
        )
        self.fusion_engine = fusion_engine or BrandProfileFusionEngine(catalog)

    @staticmethod
    def _settled(name: str, result: Any) -> Optional[Any]:
        """A failed source becomes None without affecting the others."""
        if isinstance(result, BaseException):
            logger.error(f"{name} extraction failed: {result}", exc_info=result)
            return None
        return result

    async def extract(self, data: RawExtractionInput) -> BrandProfile:
        """Gather website, social and competitor signals, then fuse them."""
        logger.info(f"Extracting brand for {data.business_name} ({data.category}, {data.location or 'no location'})")

        markup, social, competitors = await asyncio.gather(
            asyncio.to_thread(self.markup_extractor.analyze, data.existing_website),
            asyncio.to_thread(self.social_extractor.analyze, data.social_handle),
            asyncio.to_thread(
                self.competitor_aggregator.aggregate,
                data.category,
                data.location,
                data.competitor_urls,
            ),
            return_exceptions=True,
        )

        profile = self.fusion_engine.fuse(
            data,
            markup=self._settled("Website", markup),
            social=self._settled("Social", social),
            competitors=self._settled("Competitor", competitors),
        )

        summary = ", ".join(f"{family}={source}" for family, source in profile.sources().items())
        logger.info(f"✓ Brand profile ready: {summary}")
        return profile

    async def create_site(self, data: RawExtractionInput, generator: SiteGenerator) -> Tuple[BrandProfile, GenerationArtifact]:
        """Extract, fuse, generate and persist a site for one business."""
        profile = await self.extract(data)
        artifact = await generator.generate_and_save(profile)
        return profile, artifact
