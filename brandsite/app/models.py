"""Data models for extraction signals, the fused Brand Profile and generation results."""
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from brandsite.agents.color_utils import parse_color_value


SourceTier = Literal["user", "social", "markup", "competitors", "default"]
ModelTier = Literal["fast", "quality"]


class FrozenModel(BaseModel):
    """Base for every model built once per request and never mutated."""
    model_config = {"frozen": True, "populate_by_name": True}


# ============================================================================
# EXTRACTION INPUT
# ============================================================================

class RawExtractionInput(FrozenModel):
    """Everything the caller knows about the business before extraction."""
    business_name: str = Field(min_length=1, description="Business name")
    category: str = Field(min_length=1, description="Business category, e.g. plumber or cafe")
    location: str = Field(default="", description="Suburb or city the business serves")

    # Source locators
    existing_website: Optional[str] = Field(default=None, description="Existing website URL")
    social_handle: Optional[str] = Field(default=None, description="Instagram handle")
    facebook_url: Optional[str] = Field(default=None, description="Facebook page URL")
    competitor_urls: List[str] = Field(default_factory=list, description="Known competitor URLs")

    # Explicit preferences
    preferred_colors: List[str] = Field(default_factory=list, description="Hex or rgb() colors requested by the client")
    preferred_tone: Optional[str] = Field(default=None, description="Tone keyword, e.g. friendly or luxury")
    style_preferences: Optional[str] = Field(default=None, description="Free-text style wishes")
    services: List[str] = Field(default_factory=list, description="Services offered")
    unique_selling_points: List[str] = Field(default_factory=list, description="Unique selling points")
    target_customers: List[str] = Field(default_factory=list, description="Target customer groups")
    additional_notes: Optional[str] = Field(default=None, description="Anything else the client mentioned")

    # Contact and uploads
    phone: Optional[str] = Field(default=None, description="Phone number")
    email: Optional[str] = Field(default=None, description="Email address")
    address: Optional[str] = Field(default=None, description="Street address")
    hours: Optional[str] = Field(default=None, description="Opening hours")
    logo_url: Optional[str] = Field(default=None, description="Uploaded logo URL")

    @field_validator("social_handle")
    @classmethod
    def _strip_handle(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().lstrip("@")
        return value or None

    @field_validator("preferred_colors")
    @classmethod
    def _normalize_colors(cls, value: List[str]) -> List[str]:
        """Every entry must be a hex or rgb() color; stored as lowercase #rrggbb."""
        colors = []
        for item in value:
            if not item or not item.strip():
                continue
            color = parse_color_value(item)
            if color is None:
                raise ValueError(f"'{item}' is not a hex or rgb() color")
            colors.append(color)
        return colors

    @field_validator("services", "unique_selling_points", "target_customers", "competitor_urls")
    @classmethod
    def _drop_blank_items(cls, value: List[str]) -> List[str]:
        return [item.strip() for item in value if item and item.strip()]

    def preference_text(self) -> str:
        """Free text that drives style preset matching."""
        parts = [self.style_preferences, self.preferred_tone, self.additional_notes]
        return " ".join(part.strip() for part in parts if part and part.strip())


# ============================================================================
# MARKUP SIGNALS
# ============================================================================

class MarkupColors(FrozenModel):
    """Colors found in a page's markup, classified into roles."""
    palette: List[str] = Field(default_factory=list, description="Up to 10 hex colors in first-seen order")
    primary: Optional[str] = Field(default=None, description="Most saturated color")
    secondary: Optional[str] = Field(default=None, description="Second most saturated color")
    accent: Optional[str] = Field(default=None, description="First strongly saturated color")
    background: Optional[str] = Field(default=None, description="Lightest color")
    text: Optional[str] = Field(default=None, description="Darkest color")


class MarkupFonts(FrozenModel):
    """Font families declared by a page."""
    heading: Optional[str] = Field(default=None, description="Heading font guess")
    body: Optional[str] = Field(default=None, description="Body font guess")
    detected: List[str] = Field(default_factory=list, description="Up to 5 detected families")


class MarkupLayout(FrozenModel):
    """Coarse layout classification."""
    style: str = Field(default="modern", description="minimal, bold, corporate, creative, warm or modern")
    has_hero_image: bool = Field(default=False, description="Whether a hero or banner is present")
    hero_style: str = Field(default="minimal", description="video, slider, full-bleed, split or minimal")
    nav_style: str = Field(default="static", description="fixed, hamburger or static")
    section_count: int = Field(default=0, description="Number of <section> elements")


class MarkupContent(FrozenModel):
    """Copy found on a page."""
    tagline: Optional[str] = Field(default=None, description="First <h1> text")
    description: Optional[str] = Field(default=None, description="Meta description")
    services: List[str] = Field(default_factory=list, description="Service name candidates")
    trust_signals: List[str] = Field(default_factory=list, description="Trust phrases present on the page")
    cta_text: List[str] = Field(default_factory=list, description="Call-to-action button texts")


class MarkupImages(FrozenModel):
    """Image URLs referenced by a page."""
    logo: Optional[str] = Field(default=None, description="Logo image URL")
    hero: Optional[str] = Field(default=None, description="Hero image URL")
    gallery: List[str] = Field(default_factory=list, description="Up to 10 image URLs")


class PageMeta(FrozenModel):
    """Document metadata."""
    title: Optional[str] = Field(default=None, description="<title> text")
    description: Optional[str] = Field(default=None, description="Meta description")


class MarkupSignalSet(FrozenModel):
    """Everything the markup heuristics recovered from one page."""
    url: str = Field(description="Page URL")
    colors: MarkupColors = Field(default_factory=MarkupColors)
    fonts: MarkupFonts = Field(default_factory=MarkupFonts)
    layout: MarkupLayout = Field(default_factory=MarkupLayout)
    content: MarkupContent = Field(default_factory=MarkupContent)
    images: MarkupImages = Field(default_factory=MarkupImages)
    meta: PageMeta = Field(default_factory=PageMeta)


# ============================================================================
# SOCIAL SIGNALS
# ============================================================================

class SocialProfile(FrozenModel):
    """Public profile fields."""
    display_name: str = Field(default="", description="Display name")
    bio: str = Field(default="", description="Profile biography")
    website: Optional[str] = Field(default=None, description="External link in bio")
    follower_count: int = Field(default=0, description="Followers")
    post_count: int = Field(default=0, description="Total posts")
    avatar_url: Optional[str] = Field(default=None, description="Profile picture URL")


class SocialBrand(FrozenModel):
    """Brand cues inferred from bio and captions."""
    colors: List[str] = Field(default_factory=list, description="Hex colors named in the text")
    tone: str = Field(default="professional", description="Tone label")
    aesthetic: str = Field(default="clean and professional", description="Aesthetic description")


class SocialContent(FrozenModel):
    """Content patterns across recent posts."""
    hashtags: List[str] = Field(default_factory=list, description="Top hashtags")
    themes: List[str] = Field(default_factory=list, description="Topic themes")
    posting_style: str = Field(default="mixed", description="product-focused, lifestyle, behind-scenes or mixed")


class SocialMedia(FrozenModel):
    """One recent post."""
    url: str = Field(description="Image URL")
    caption: str = Field(default="", description="Caption text")
    likes: int = Field(default=0, description="Engagement count")


class SocialSignalSet(FrozenModel):
    """Everything recovered from one social profile."""
    handle: str = Field(description="Profile handle")
    profile: SocialProfile = Field(default_factory=SocialProfile)
    brand: SocialBrand = Field(default_factory=SocialBrand)
    content: SocialContent = Field(default_factory=SocialContent)
    media: List[SocialMedia] = Field(default_factory=list, description="Recent posts ranked by engagement")


# ============================================================================
# COMPETITOR PATTERNS
# ============================================================================

class CompetitorPatternSet(FrozenModel):
    """Cross-site frequency summary of competitor pages."""
    colors: List[str] = Field(default_factory=list, description="Top 5 colors")
    fonts: List[str] = Field(default_factory=list, description="Top 3 fonts")
    layout_style: str = Field(default="modern", description="Most common layout style")
    hero_style: str = Field(default="minimal", description="Most common hero style")
    nav_style: str = Field(default="static", description="Most common navigation style")
    trust_signals: List[str] = Field(default_factory=list, description="Top 6 trust phrases")
    insights: List[str] = Field(default_factory=list, description="Free-text observations")
    analyzed_count: int = Field(default=0, description="Pages successfully analyzed")
    analyzed_urls: List[str] = Field(default_factory=list, description="URLs that were analyzed")


# ============================================================================
# CATALOG MODELS
# ============================================================================

class PaletteRoles(FrozenModel):
    """A complete five-role palette."""
    primary: str
    secondary: str
    accent: str
    background: str
    text: str


class PresetTypography(FrozenModel):
    heading_style: str = Field(description="serif, sans-serif or display")
    body_style: str = Field(description="serif or sans-serif")
    heading_weight: str = Field(description="normal, bold or black")


class PresetLayout(FrozenModel):
    hero_style: str = Field(description="gradient, image-overlay, split, minimal or video")
    spacing: str = Field(description="compact, comfortable or spacious")
    card_style: str = Field(description="elevated, flat, outlined or glass")


class StylePreset(FrozenModel):
    """A named visual style triggered by keywords in the client's own words."""
    key: str = Field(description="Catalog key")
    name: str = Field(description="Display name")
    keywords: List[str] = Field(default_factory=list, description="Trigger keywords")
    colors: PaletteRoles
    typography: PresetTypography
    layout: PresetLayout
    vibe: str = Field(description="One-line description for copywriting")


class CategoryLayout(FrozenModel):
    hero_style: str
    nav_style: str
    section_density: str
    image_style: str


class CategoryProfile(FrozenModel):
    """Default bundle used when no source says anything about a family."""
    colors: PaletteRoles
    heading_font: str
    body_font: str
    layout: CategoryLayout
    tone: str
    copy_style: str
    services: List[str]
    trust_signals: List[str]
    must_have_elements: List[str]
    call_to_action: str
    tagline: str
    hero_image: str
    gallery_images: List[str]
    default_style: str = Field(default="warm-professional", description="Style preset key")
    sections: List[str] = Field(default_factory=list, description="Business-specific page sections")


# ============================================================================
# BRAND PROFILE
# ============================================================================

class ResolvedColors(FrozenModel):
    primary: str
    secondary: str
    accent: str
    background: str
    text: str
    source: SourceTier


class ResolvedFonts(FrozenModel):
    heading: str
    body: str
    source: SourceTier


class ResolvedLayout(FrozenModel):
    hero_style: str = Field(description="full-bleed, split, minimal, centered or asymmetric")
    nav_style: str = Field(description="fixed, hidden, transparent or simple")
    section_density: str = Field(description="compact, moderate or spacious")
    image_style: str = Field(description="large, grid, masonry or minimal")
    source: SourceTier


class ResolvedTone(FrozenModel):
    overall: str
    copy_style: str = Field(description="formal, conversational, direct or storytelling")
    source: SourceTier


class ResolvedContent(FrozenModel):
    headline: str
    tagline: str
    about: str
    services: List[str]
    unique_selling_points: List[str]
    trust_signals: List[str]
    call_to_action: str
    source: SourceTier


class ResolvedImages(FrozenModel):
    logo: Optional[str] = Field(default=None, description="Logo URL; None means use a text wordmark")
    hero: str
    gallery: List[str]
    source: SourceTier


class ResolvedContact(FrozenModel):
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    hours: Optional[str] = None
    social_links: Dict[str, str] = Field(default_factory=dict, description="Network name to profile URL")
    source: SourceTier


class IndustryContext(FrozenModel):
    common_patterns: List[str] = Field(default_factory=list)
    differentiators: List[str] = Field(default_factory=list)
    must_have_elements: List[str]
    competitor_insights: List[str] = Field(default_factory=list)
    source: SourceTier


class ResolvedStyle(FrozenModel):
    preset: str = Field(description="Style preset key")
    name: str
    vibe: str
    spacing: str
    card_style: str
    source: SourceTier


class SignalBundle(FrozenModel):
    """The raw extractor outputs a profile was fused from."""
    markup: Optional[MarkupSignalSet] = None
    social: Optional[SocialSignalSet] = None
    competitors: Optional[CompetitorPatternSet] = None


class BrandProfile(FrozenModel):
    """The fused brand, one value per attribute family plus its provenance."""
    business_name: str
    category: str
    location: str
    target_customers: List[str] = Field(default_factory=list)
    additional_notes: Optional[str] = None
    colors: ResolvedColors
    fonts: ResolvedFonts
    layout: ResolvedLayout
    tone: ResolvedTone
    content: ResolvedContent
    images: ResolvedImages
    contact: ResolvedContact
    industry_context: IndustryContext
    style: ResolvedStyle
    signals: SignalBundle = Field(default_factory=SignalBundle)

    def sources(self) -> Dict[str, str]:
        """Winning tier per attribute family."""
        return {
            "colors": self.colors.source,
            "fonts": self.fonts.source,
            "layout": self.layout.source,
            "tone": self.tone.source,
            "content": self.content.source,
            "images": self.images.source,
            "contact": self.contact.source,
            "industry_context": self.industry_context.source,
            "style": self.style.source,
        }


# ============================================================================
# GENERATION
# ============================================================================

class GenerationArtifact(FrozenModel):
    """Outputs of one research, brief and site generation run."""
    slug: str = Field(description="URL-safe identifier derived from the business name")
    research: str = Field(default="", description="Research stage output, empty when skipped")
    brief: str = Field(default="", description="Design brief, empty when skipped")
    html: str = Field(description="Complete HTML document")
    generation_time: float = Field(default=0.0, description="Elapsed seconds")
    saved: bool = Field(default=False, description="Whether the store accepted the artifact")


# ============================================================================
# API RESPONSE MODELS
# ============================================================================

class ProfileResponse(BaseModel):
    """Response model for profile extraction."""
    profile: BrandProfile
    sources: Dict[str, str] = Field(default_factory=dict, description="Winning tier per family")


class GenerateResponse(BaseModel):
    """Response model for site generation."""
    slug: str
    saved: bool
    generation_time: float
    sources: Dict[str, str] = Field(default_factory=dict, description="Winning tier per family")
    brief: str = Field(default="", description="Design brief used for the site")
    html: str = Field(description="Generated HTML document")
