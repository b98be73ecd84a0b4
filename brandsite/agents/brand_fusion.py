"""Merge extractor outputs and explicit client input into one Brand Profile.

Each attribute family is resolved on its own, walking the tiers
user -> social -> markup -> competitors -> default and stopping at the first
tier that has usable data for that family. The winning tier is recorded on
the family as its ``source``.
"""
import re
from typing import List, Optional

from brandsite.agents.color_utils import shift_lightness
from brandsite.agents.social_analyzer import NEUTRAL_COLORS
from brandsite.agents.style_matcher import StylePresetMatcher
from brandsite.app.catalog import Catalog, DEFAULT_CATALOG
from brandsite.app.models import (
    BrandProfile,
    CategoryProfile,
    CompetitorPatternSet,
    IndustryContext,
    MarkupSignalSet,
    RawExtractionInput,
    ResolvedColors,
    ResolvedContact,
    ResolvedContent,
    ResolvedFonts,
    ResolvedImages,
    ResolvedLayout,
    ResolvedStyle,
    ResolvedTone,
    SignalBundle,
    SocialSignalSet,
)

DEFAULT_BACKGROUND = '#ffffff'
DEFAULT_TEXT = '#1a1a1a'
DEFAULT_BODY_FONT = 'Inter'
DEFAULT_USPS = ['Quality service', 'Experienced team', 'Customer focused']
MAX_GALLERY = 6
MAX_SERVICES = 8

HERO_STYLE_MAP = {
    'full-width': 'full-bleed',
    'full-bleed': 'full-bleed',
    'video': 'full-bleed',
    'slider': 'full-bleed',
    'split': 'split',
    'centered': 'centered',
    'minimal': 'minimal',
    'asymmetric': 'asymmetric',
}

NAV_STYLE_MAP = {
    'fixed': 'fixed',
    'sticky': 'fixed',
    'transparent': 'transparent',
    'hidden': 'hidden',
    'hamburger': 'hidden',
    'simple': 'simple',
    'static': 'simple',
}

TONE_MAP = {
    'professional': 'professional',
    'casual': 'casual',
    'luxury': 'luxurious',
    'luxurious': 'luxurious',
    'fun': 'fun',
    'playful': 'fun',
    'minimal': 'minimal',
    'minimalist': 'minimal',
    'warm': 'warm',
    'friendly': 'warm',
    'bold': 'bold',
    'elegant': 'elegant',
    'sophisticated': 'elegant',
}

COPY_STYLE_MAP = {
    'professional': 'formal',
    'casual': 'conversational',
    'luxurious': 'storytelling',
    'fun': 'conversational',
    'minimal': 'direct',
    'warm': 'conversational',
    'bold': 'direct',
    'elegant': 'storytelling',
}

TEXT_TONE_PATTERNS = [
    ('luxurious', re.compile(r'luxury|premium|exclusive|elegant')),
    ('fun', re.compile(r'fun|enjoy|love|happy|excited')),
    ('minimal', re.compile(r'minimal|simple|clean|modern')),
    ('warm', re.compile(r'warm|friendly|family|community')),
    ('bold', re.compile(r'bold|strong|powerful|dynamic')),
]


def map_tone(keyword: str) -> str:
    """Normalise a client tone keyword (or phrase) to a tone label."""
    lower = (keyword or '').strip().lower()
    if lower in TONE_MAP:
        return TONE_MAP[lower]
    for word in re.findall(r'[a-z]+', lower):
        if word in TONE_MAP:
            return TONE_MAP[word]
    return 'professional'


def tone_from_text(text: str) -> str:
    lower = (text or '').lower()
    for tone, pattern in TEXT_TONE_PATTERNS:
        if pattern.search(lower):
            return tone
    return 'professional'


def copy_style_for(tone: str) -> str:
    return COPY_STYLE_MAP.get(tone, 'formal')


def section_density(section_count: int) -> str:
    if section_count >= 8:
        return 'compact'
    if section_count <= 3:
        return 'spacious'
    return 'moderate'


def first_sentence(text: str) -> str:
    return re.split(r'(?<=[.!?])\s+', (text or '').strip())[0].strip()


def _palette_from_list(colors: List[str], source: str) -> ResolvedColors:
    """Roles from an ordered color list with at least two entries."""
    primary = colors[0]
    return ResolvedColors(
        primary=primary,
        secondary=colors[1],
        accent=colors[2] if len(colors) > 2 else shift_lightness(primary),
        background=colors[3] if len(colors) > 3 else DEFAULT_BACKGROUND,
        text=colors[4] if len(colors) > 4 else DEFAULT_TEXT,
        source=source,
    )


class BrandProfileFusionEngine:
    """Deterministic, per-family priority resolution."""

    def __init__(self, catalog: Catalog = DEFAULT_CATALOG, matcher: StylePresetMatcher = None):
        self.catalog = catalog
        self.matcher = matcher or StylePresetMatcher(catalog)

    def fuse(
        self,
        data: RawExtractionInput,
        markup: Optional[MarkupSignalSet] = None,
        social: Optional[SocialSignalSet] = None,
        competitors: Optional[CompetitorPatternSet] = None,
    ) -> BrandProfile:
        """Build a fully populated Brand Profile; every source may be None."""
        defaults = self.catalog.resolve(data.category)
        content = self._resolve_content(data, defaults, markup, social, competitors)

        return BrandProfile(
            business_name=data.business_name,
            category=data.category,
            location=data.location,
            target_customers=list(data.target_customers),
            additional_notes=data.additional_notes,
            colors=self._resolve_colors(data, defaults, markup, social, competitors),
            fonts=self._resolve_fonts(defaults, markup, competitors),
            layout=self._resolve_layout(defaults, markup, competitors),
            tone=self._resolve_tone(data, defaults, markup, social),
            content=content,
            images=self._resolve_images(data, defaults, markup, social),
            contact=self._resolve_contact(data),
            industry_context=self._resolve_industry_context(data, defaults, competitors),
            style=self._resolve_style(data),
            signals=SignalBundle(markup=markup, social=social, competitors=competitors),
        )

    # ------------------------------------------------------------------
    # Visual families
    # ------------------------------------------------------------------

    def _resolve_colors(self, data, defaults: CategoryProfile, markup, social, competitors) -> ResolvedColors:
        if len(data.preferred_colors) >= 2:
            return _palette_from_list(list(data.preferred_colors), 'user')

        # The neutral fallback means the posts named no colors at all
        if social and len(social.brand.colors) >= 2 and social.brand.colors != NEUTRAL_COLORS:
            return _palette_from_list(social.brand.colors, 'social')

        if markup and markup.colors.primary:
            found = markup.colors
            return ResolvedColors(
                primary=found.primary,
                secondary=found.secondary or found.primary,
                accent=found.accent or shift_lightness(found.primary),
                background=found.background or DEFAULT_BACKGROUND,
                text=found.text or DEFAULT_TEXT,
                source='markup',
            )

        if competitors and len(competitors.colors) >= 2:
            return _palette_from_list(competitors.colors, 'competitors')

        return ResolvedColors(**defaults.colors.model_dump(), source='default')

    def _resolve_fonts(self, defaults: CategoryProfile, markup, competitors) -> ResolvedFonts:
        if markup and markup.fonts.heading:
            return ResolvedFonts(
                heading=markup.fonts.heading,
                body=markup.fonts.body or DEFAULT_BODY_FONT,
                source='markup',
            )

        if competitors and competitors.fonts:
            fonts = competitors.fonts
            return ResolvedFonts(
                heading=fonts[0],
                body=fonts[1] if len(fonts) > 1 else DEFAULT_BODY_FONT,
                source='competitors',
            )

        return ResolvedFonts(heading=defaults.heading_font, body=defaults.body_font, source='default')

    def _resolve_layout(self, defaults: CategoryProfile, markup, competitors) -> ResolvedLayout:
        if markup:
            layout = markup.layout
            return ResolvedLayout(
                hero_style=HERO_STYLE_MAP.get(layout.hero_style, 'full-bleed'),
                nav_style=NAV_STYLE_MAP.get(layout.nav_style, 'fixed'),
                section_density=section_density(layout.section_count),
                image_style='large' if layout.has_hero_image else 'grid',
                source='markup',
            )

        if competitors:
            return ResolvedLayout(
                hero_style=HERO_STYLE_MAP.get(competitors.hero_style, 'full-bleed'),
                nav_style=NAV_STYLE_MAP.get(competitors.nav_style, 'fixed'),
                section_density='moderate',
                image_style=defaults.layout.image_style,
                source='competitors',
            )

        return ResolvedLayout(**defaults.layout.model_dump(), source='default')

    def _resolve_tone(self, data, defaults: CategoryProfile, markup, social) -> ResolvedTone:
        if data.preferred_tone and data.preferred_tone.strip():
            tone = map_tone(data.preferred_tone)
            return ResolvedTone(overall=tone, copy_style=copy_style_for(tone), source='user')

        if social:
            tone = social.brand.tone
            return ResolvedTone(overall=tone, copy_style=copy_style_for(tone), source='social')

        description = markup and (markup.meta.description or markup.content.description)
        if description:
            tone = tone_from_text(description)
            return ResolvedTone(overall=tone, copy_style=copy_style_for(tone), source='markup')

        return ResolvedTone(overall=defaults.tone, copy_style=defaults.copy_style, source='default')

    # ------------------------------------------------------------------
    # Content families
    # ------------------------------------------------------------------

    def _resolve_content(self, data, defaults: CategoryProfile, markup, social, competitors) -> ResolvedContent:
        if data.services:
            services, source = list(data.services), 'user'
        elif markup and markup.content.services:
            services, source = markup.content.services[:MAX_SERVICES], 'markup'
        else:
            services, source = list(defaults.services), 'default'

        if data.unique_selling_points:
            usps = list(data.unique_selling_points)
        else:
            usps = [f"Specializing in {theme}" for theme in (social.content.themes if social else [])]
            if markup and markup.content.services:
                usps.append(f"Expert {markup.content.services[0]}")
            usps = usps or list(DEFAULT_USPS)

        if markup and markup.content.trust_signals:
            trust_signals = list(markup.content.trust_signals)
        elif competitors and competitors.trust_signals:
            trust_signals = list(competitors.trust_signals)
        else:
            trust_signals = list(defaults.trust_signals)

        where = f" in {data.location}" if data.location else ""
        description = markup.meta.description if markup else None

        headline = (markup.meta.title if markup else None) or f"{data.business_name} - {data.category}{where}"
        tagline = (
            (first_sentence(description) if description else None)
            or (markup.content.tagline if markup else None)
            or defaults.tagline
        )
        about = description or (
            f"{data.business_name} is a {data.category.lower()}{where} offering "
            f"{', '.join(services[:3])}."
        )

        return ResolvedContent(
            headline=headline,
            tagline=tagline,
            about=about,
            services=services,
            unique_selling_points=usps,
            trust_signals=trust_signals,
            call_to_action=defaults.call_to_action,
            source=source,
        )

    def _resolve_images(self, data, defaults: CategoryProfile, markup, social) -> ResolvedImages:
        logo = data.logo_url or (markup.images.logo if markup else None)
        site_images = []
        if markup:
            site_images = list(markup.images.gallery) or ([markup.images.hero] if markup.images.hero else [])

        if social and social.media:
            gallery = [post.url for post in social.media[:MAX_GALLERY]]
            for url in site_images:
                if len(gallery) >= MAX_GALLERY:
                    break
                if url not in gallery:
                    gallery.append(url)
            return ResolvedImages(logo=logo, hero=social.media[0].url, gallery=gallery, source='social')

        if site_images:
            gallery = [url for url in site_images if url != logo][:MAX_GALLERY] or site_images[:MAX_GALLERY]
            hero = markup.images.hero or gallery[0]
            return ResolvedImages(logo=logo, hero=hero, gallery=gallery, source='markup')

        return ResolvedImages(
            logo=logo,
            hero=defaults.hero_image,
            gallery=list(defaults.gallery_images),
            source='default',
        )

    def _resolve_contact(self, data: RawExtractionInput) -> ResolvedContact:
        social_links = {}
        if data.social_handle:
            social_links['instagram'] = f"https://instagram.com/{data.social_handle}"
        if data.facebook_url:
            social_links['facebook'] = data.facebook_url

        supplied = any([data.phone, data.email, data.address, data.hours, social_links])
        return ResolvedContact(
            phone=data.phone,
            email=data.email,
            address=data.address,
            hours=data.hours,
            social_links=social_links,
            source='user' if supplied else 'default',
        )

    def _resolve_industry_context(self, data, defaults: CategoryProfile, competitors) -> IndustryContext:
        if competitors:
            return IndustryContext(
                common_patterns=[
                    f"Hero style: {competitors.hero_style}",
                    f"Navigation: {competitors.nav_style}",
                    f"Layout: {competitors.layout_style}",
                ],
                differentiators=list(data.unique_selling_points),
                must_have_elements=list(defaults.must_have_elements),
                competitor_insights=list(competitors.insights),
                source='competitors',
            )

        return IndustryContext(
            differentiators=list(data.unique_selling_points),
            must_have_elements=list(defaults.must_have_elements),
            source='default',
        )

    def _resolve_style(self, data: RawExtractionInput) -> ResolvedStyle:
        preset, _ = self.matcher.best_match(data.preference_text())
        source = 'user'
        if preset is None:
            preset, source = self.catalog.default_preset(data.category), 'default'

        return ResolvedStyle(
            preset=preset.key,
            name=preset.name,
            vibe=preset.vibe,
            spacing=preset.layout.spacing,
            card_style=preset.layout.card_style,
            source=source,
        )
