import asyncio

from brandsite.agents.brand_orchestrator import BrandOrchestrator
from brandsite.agents.competitor_analyzer import CompetitorAggregator
from brandsite.agents.markup_analyzer import MarkupSignalExtractor
from brandsite.agents.site_generator import SiteGenerator
from brandsite.agents.social_analyzer import SocialSignalExtractor
from brandsite.agents.tools import TextGenerator
from brandsite.app.models import RawExtractionInput
from tests.fakes import (
    PLUMBER_SITE,
    FakeChatModel,
    FakeFetcher,
    FakeSearchTool,
    FakeSocialClient,
    MemoryStore,
    RecordingFactory,
)


class ExplodingSocialExtractor:
    def analyze(self, handle):
        raise RuntimeError('scraper changed its schema')


def orchestrator(settings, fetcher=None, social=None, search=None):
    fetcher = fetcher or FakeFetcher()
    return BrandOrchestrator(
        settings,
        markup_extractor=MarkupSignalExtractor(fetcher),
        social_extractor=social or SocialSignalExtractor(FakeSocialClient(enabled=False)),
        competitor_aggregator=CompetitorAggregator(MarkupSignalExtractor(fetcher), search or FakeSearchTool(enabled=False)),
    )


def test_acme_without_any_sources(settings, acme_input):
    profile = asyncio.run(orchestrator(settings).extract(acme_input))
    assert profile.colors.source == 'user'
    assert profile.colors.primary == '#1e3a5f'
    assert profile.fonts.source == 'default'
    assert profile.content.call_to_action == 'Call Now'
    assert profile.signals.markup is None


def test_failing_extractor_does_not_sink_the_others(settings):
    fetcher = FakeFetcher({'https://richmondpipes.com.au': PLUMBER_SITE})
    data = RawExtractionInput(
        business_name='Richmond Pipes',
        category='plumbing',
        location='Richmond',
        existing_website='richmondpipes.com.au',
        social_handle='@richmondpipes',
    )
    profile = asyncio.run(orchestrator(settings, fetcher, social=ExplodingSocialExtractor()).extract(data))
    assert profile.signals.social is None
    assert profile.colors.source == 'markup'
    assert profile.fonts.source == 'markup'
    assert profile.tone.source == 'markup'
    assert profile.contact.social_links == {'instagram': 'https://instagram.com/richmondpipes'}


def test_competitor_urls_are_used_without_search(settings):
    fetcher = FakeFetcher({'https://rival.com.au': PLUMBER_SITE})
    data = RawExtractionInput(
        business_name='Acme Plumbing',
        category='plumber',
        competitor_urls=['https://rival.com.au', 'https://facebook.com/rival'],
    )
    profile = asyncio.run(orchestrator(settings, fetcher).extract(data))
    assert profile.signals.competitors.analyzed_urls == ['https://rival.com.au']
    assert profile.layout.source == 'competitors'
    assert profile.industry_context.source == 'competitors'


def test_create_site_runs_extraction_then_generation(settings, acme_input):
    store = MemoryStore()
    model = FakeChatModel(['research', 'brief', '<!DOCTYPE html><html></html>'])
    generator = SiteGenerator(
        text_generator=TextGenerator(settings, llm_factory=RecordingFactory(model)),
        store=store,
        settings=settings,
    )
    profile, artifact = asyncio.run(orchestrator(settings).create_site(acme_input, generator))
    assert profile.business_name == 'Acme Plumbing'
    assert artifact.slug == 'acme-plumbing'
    assert artifact.saved is True
    assert 'acme-plumbing' in store.saved
