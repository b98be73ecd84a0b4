"""Research, brief and site generation as a small staged pipeline."""
import asyncio
import re
import time
from dataclasses import dataclass
from typing import Callable, Dict, List

from brandsite.agents.prompt_template import (
    BRIEF_PROMPT,
    COLOR_PROVENANCE,
    COPY_DESCRIPTIONS,
    DENSITY_DESCRIPTIONS,
    FONT_PROVENANCE,
    HERO_DESCRIPTIONS,
    LAYOUT_PROVENANCE,
    NAV_DESCRIPTIONS,
    RESEARCH_PROMPT,
    SITE_PROMPT,
    TONE_DESCRIPTIONS,
    TONE_PROVENANCE,
)
from brandsite.agents.tools import GenerationError, TextGenerator
from brandsite.app.catalog import Catalog, DEFAULT_CATALOG
from brandsite.app.config import Settings, get_settings
from brandsite.app.logger import logger
from brandsite.app.models import BrandProfile, GenerationArtifact
from brandsite.app.site_store import LocalSiteStore, SiteStore, slugify

CODE_FENCE_PATTERN = re.compile(r'```(?:html)?\s*([\s\S]*?)```', re.IGNORECASE)


@dataclass(frozen=True)
class Stage:
    """One prompt/response step; earlier outputs are passed to the prompt builder."""
    name: str
    build_prompt: Callable[[BrandProfile, Dict[str, str]], str]
    tier: str
    max_tokens: int
    required: bool = False
    postprocess: Callable[[str], str] = str.strip


def clean_html(text: str) -> str:
    """Strip code fences and commentary around the HTML document."""
    html = text or ''

    fenced = CODE_FENCE_PATTERN.search(html)
    if fenced:
        html = fenced.group(1)

    start = html.lower().find('<!doctype')
    if start > 0:
        html = html[start:]

    end = html.lower().rfind('</html>')
    if end != -1:
        html = html[:end + len('</html>')]

    return html.strip()


async def run_pipeline(stages: List[Stage], profile: BrandProfile, generator: TextGenerator) -> Dict[str, str]:
    """Run stages in order; optional stages degrade to an empty string."""
    outputs = {}
    for stage in stages:
        logger.info(f"Stage '{stage.name}' ({stage.tier} tier)...")
        prompt = stage.build_prompt(profile, outputs)
        try:
            text = stage.postprocess(
                await generator.complete(prompt, tier=stage.tier, max_tokens=stage.max_tokens)
            )
        except GenerationError:
            if stage.required:
                raise
            logger.warning(f"⚠ Stage '{stage.name}' produced nothing, continuing without it")
            text = ""
        except Exception as e:
            if stage.required:
                logger.error(f"✗ Stage '{stage.name}' failed: {e}", exc_info=True)
                raise GenerationError(f"{stage.name} stage failed: {e}") from e
            logger.warning(f"⚠ Stage '{stage.name}' failed, continuing without it: {e}")
            text = ""

        if stage.required and not text:
            raise GenerationError(f"{stage.name} stage returned no usable output")

        logger.info(f"✓ Stage '{stage.name}' done ({len(text)} chars)")
        outputs[stage.name] = text
    return outputs


# ============================================================================
# PROMPT CONTEXT
# ============================================================================

def _bullets(items: List[str]) -> str:
    return '\n'.join(f"- {item}" for item in items)


def business_context(profile: BrandProfile) -> str:
    contact = profile.contact
    lines = [
        f"Business: {profile.business_name}",
        f"Type: {profile.category}",
        f"Location: {profile.location or 'Not specified'}",
        f"Services: {', '.join(profile.content.services)}",
        f"Target customers: {', '.join(profile.target_customers) or 'Not specified'}",
        f"Website: {profile.signals.markup.url if profile.signals.markup else 'Not provided'}",
        f"Instagram: {contact.social_links.get('instagram', 'Not provided')}",
    ]
    if profile.additional_notes:
        lines.append(f"Notes from the client: {profile.additional_notes}")
    return '\n'.join(lines)


def provenance_notes(profile: BrandProfile) -> str:
    """Where each part of the brand came from, in words."""
    colors = profile.colors
    notes = [
        f"Colors {colors.primary}, {colors.secondary}, {colors.accent} were "
        f"{COLOR_PROVENANCE[colors.source]}.",
        f"Fonts {profile.fonts.heading} / {profile.fonts.body} were "
        f"{FONT_PROVENANCE.get(profile.fonts.source, FONT_PROVENANCE['default'])}.",
        f"Layout ({profile.layout.hero_style} hero, {profile.layout.nav_style} navigation) was "
        f"{LAYOUT_PROVENANCE.get(profile.layout.source, LAYOUT_PROVENANCE['default'])}.",
        f"Tone '{profile.tone.overall}' is {TONE_PROVENANCE.get(profile.tone.source, TONE_PROVENANCE['default'])}.",
        f"Visual style: {profile.style.name} ({profile.style.vibe}).",
    ]
    insights = profile.industry_context.competitor_insights
    if insights:
        notes.append(f"Competitor observations: {'; '.join(insights)}.")
    return '\n'.join(notes)


def _image_context(profile: BrandProfile) -> str:
    images = profile.images
    lines = []
    if images.source == 'default':
        lines.append("No brand images available. Use these Unsplash images (real URLs, not placeholders):")
    else:
        lines.append(f"Images from their {'social media' if images.source == 'social' else 'website'}:")
    lines.append(f"Hero image: {images.hero}")
    if images.logo:
        lines.append(f"Logo: {images.logo}")
    else:
        lines.append("Logo: none provided, use a text wordmark of the business name")
    lines.append("Gallery images:")
    lines.extend(f"{i}. {url}" for i, url in enumerate(images.gallery, 1))
    return '\n'.join(lines)


def brand_context(profile: BrandProfile) -> str:
    """Every resolved family, with its provenance, as prompt text."""
    colors, fonts, layout, tone = profile.colors, profile.fonts, profile.layout, profile.tone
    content, contact, industry = profile.content, profile.contact, profile.industry_context

    sections = [
        f"""### Colors (source: {colors.source})
- Primary: {colors.primary} (headings, buttons, key elements)
- Secondary: {colors.secondary} (accents, hover states)
- Accent: {colors.accent} (highlights, calls to action)
- Background: {colors.background}
- Text: {colors.text}
These colors were {COLOR_PROVENANCE[colors.source]}.""",
        f"""### Typography (source: {fonts.source})
- Headings: "{fonts.heading}" (Google Fonts)
- Body: "{fonts.body}" (Google Fonts)""",
        f"""### Layout (source: {layout.source})
- Hero: {layout.hero_style} - {HERO_DESCRIPTIONS.get(layout.hero_style, '')}
- Navigation: {layout.nav_style} - {NAV_DESCRIPTIONS.get(layout.nav_style, '')}
- Section density: {layout.section_density} ({DENSITY_DESCRIPTIONS.get(layout.section_density, '')})
- Image style: {layout.image_style}
- Visual style: {profile.style.name}, {profile.style.vibe}; {profile.style.spacing} spacing, {profile.style.card_style} cards""",
        f"""### Tone (source: {tone.source})
- Overall: {tone.overall} - {TONE_DESCRIPTIONS.get(tone.overall, '')}
- Copy style: {tone.copy_style} - {COPY_DESCRIPTIONS.get(tone.copy_style, '')}""",
        f"""### Content
Headline: "{content.headline}"
Tagline: "{content.tagline}"
About: {content.about}
Services:
{_bullets(content.services)}
Unique selling points:
{_bullets(content.unique_selling_points)}
Trust signals:
{_bullets(content.trust_signals)}
Primary call to action: {content.call_to_action}""",
        f"### Images\n{_image_context(profile)}",
        f"""### Contact
- Phone: {contact.phone or 'Not provided'}
- Email: {contact.email or 'Not provided'}
- Address: {contact.address or 'Not provided'}
- Hours: {contact.hours or 'Not provided'}"""
        + ''.join(f"\n- {network.title()}: {url}" for network, url in contact.social_links.items()),
        f"""### Industry context
Must-have elements: {', '.join(industry.must_have_elements)}"""
        + (f"\nIndustry patterns: {', '.join(industry.common_patterns)}" if industry.common_patterns else '')
        + (f"\nDifferentiators to highlight: {', '.join(industry.differentiators)}" if industry.differentiators else ''),
    ]
    return '\n\n'.join(sections)


class SiteGenerator:
    """Three-stage generation of a one-page site from a Brand Profile."""

    def __init__(
        self,
        text_generator: TextGenerator = None,
        store: SiteStore = None,
        catalog: Catalog = DEFAULT_CATALOG,
        settings: Settings = None,
    ):
        self.settings = settings or get_settings()
        self.text_generator = text_generator or TextGenerator(self.settings)
        self.store = store or LocalSiteStore(self.settings.output_dir)
        self.catalog = catalog
        self.stages = [
            Stage("research", self._research_prompt, tier="fast", max_tokens=1000),
            Stage("brief", self._brief_prompt, tier="fast", max_tokens=1000),
            Stage("site", self._site_prompt, tier="quality", max_tokens=16000, required=True, postprocess=clean_html),
        ]

    def _research_prompt(self, profile: BrandProfile, outputs: Dict[str, str]) -> str:
        return RESEARCH_PROMPT.format(
            business_name=profile.business_name,
            category=profile.category,
            location=profile.location or 'their area',
            business_context=business_context(profile),
            provenance_notes=provenance_notes(profile),
        )

    def _brief_prompt(self, profile: BrandProfile, outputs: Dict[str, str]) -> str:
        return BRIEF_PROMPT.format(
            business_name=profile.business_name,
            category=profile.category,
            location=profile.location or 'their area',
            brand_context=brand_context(profile),
            research=outputs.get("research") or "No research available; rely on the brand profile.",
        )

    def _site_prompt(self, profile: BrandProfile, outputs: Dict[str, str]) -> str:
        sections = self.catalog.resolve(profile.category).sections
        extra = f"\nAlso include:\n{_bullets(sections)}" if sections else ""
        return SITE_PROMPT.format(
            business_name=profile.business_name,
            category=profile.category,
            location=profile.location or 'their area',
            brand_context=brand_context(profile),
            brief=outputs.get("brief") or "No separate brief; follow the brand profile above exactly.",
            extra_sections=extra,
        )

    async def generate(self, profile: BrandProfile, slug: str = None) -> GenerationArtifact:
        """Run research, brief and site stages; raises GenerationError if the site stage fails."""
        start = time.perf_counter()
        logger.info(f"Generating site for {profile.business_name}")
        outputs = await run_pipeline(self.stages, profile, self.text_generator)
        return GenerationArtifact(
            slug=slug or slugify(profile.business_name),
            research=outputs.get("research", ""),
            brief=outputs.get("brief", ""),
            html=outputs["site"],
            generation_time=round(time.perf_counter() - start, 2),
        )

    async def generate_and_save(self, profile: BrandProfile, slug: str = None) -> GenerationArtifact:
        """Generate, then hand the artifact to the store."""
        start = time.perf_counter()
        artifact = await self.generate(profile, slug)
        saved = await asyncio.to_thread(self.store.save, artifact.slug, artifact)
        elapsed = round(time.perf_counter() - start, 2)
        logger.info(f"✓ Site '{artifact.slug}' generated in {elapsed}s (saved={saved})")
        return artifact.model_copy(update={"saved": saved, "generation_time": elapsed})
