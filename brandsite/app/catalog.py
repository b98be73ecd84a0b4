"""Static lookup tables: style presets and per-category default bundles.

Everything here is immutable and is handed to the matcher and the fusion
engine through their constructors, so tests can inject a smaller catalog.
"""
from types import MappingProxyType
from typing import Dict
from pydantic import Field, model_validator

from brandsite.app.models import (
    CategoryLayout,
    CategoryProfile,
    FrozenModel,
    PaletteRoles,
    PresetLayout,
    PresetTypography,
    StylePreset,
)

FALLBACK_STYLE = "warm-professional"


class Catalog(FrozenModel):
    """Read-only bundle of every table the heuristics consult."""
    presets: Dict[str, StylePreset] = Field(description="Style presets in tie-break order")
    categories: Dict[str, CategoryProfile] = Field(description="Default bundles by canonical category")
    aliases: Dict[str, str] = Field(default_factory=dict, description="Alternate category names")
    fallback: CategoryProfile = Field(description="Bundle for unknown categories")

    @model_validator(mode="after")
    def _read_only_tables(self) -> "Catalog":
        # Tables are read-only once built
        for name in ("presets", "categories", "aliases"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        return self

    def canonical(self, category: str) -> str:
        key = (category or "").strip().lower()
        return self.aliases.get(key, key)

    def resolve(self, category: str) -> CategoryProfile:
        """Default bundle for a category, never failing."""
        return self.categories.get(self.canonical(category), self.fallback)

    def preset(self, key: str) -> StylePreset:
        if key in self.presets:
            return self.presets[key]
        if FALLBACK_STYLE in self.presets:
            return self.presets[FALLBACK_STYLE]
        return next(iter(self.presets.values()))

    def default_preset(self, category: str) -> StylePreset:
        return self.preset(self.resolve(category).default_style)


def _palette(primary, secondary, accent, background, text) -> PaletteRoles:
    return PaletteRoles(primary=primary, secondary=secondary, accent=accent, background=background, text=text)


def _layout(hero_style, nav_style, section_density, image_style) -> CategoryLayout:
    return CategoryLayout(
        hero_style=hero_style,
        nav_style=nav_style,
        section_density=section_density,
        image_style=image_style,
    )


def _preset(key, name, keywords, colors, typography, layout, vibe) -> StylePreset:
    return StylePreset(
        key=key,
        name=name,
        keywords=keywords,
        colors=_palette(*colors),
        typography=PresetTypography(heading_style=typography[0], body_style=typography[1], heading_weight=typography[2]),
        layout=PresetLayout(hero_style=layout[0], spacing=layout[1], card_style=layout[2]),
        vibe=vibe,
    )


# ============================================================================
# STYLE PRESETS
# ============================================================================

STYLE_PRESETS = [
    _preset(
        "luxury-minimal", "Luxury Minimal",
        ["chanel", "luxury", "high-end", "highend", "premium", "elegant", "sophisticated", "minimalist",
         "minimal", "clean", "black and white", "monochrome", "dior", "gucci", "upscale"],
        ("#000000", "#1a1a1a", "#c9a86c", "#ffffff", "#1a1a1a"),
        ("serif", "sans-serif", "normal"),
        ("minimal", "spacious", "flat"),
        "understated elegance with generous whitespace",
    ),
    _preset(
        "modern-bold", "Modern Bold",
        ["modern", "bold", "innovative", "tech", "startup", "cutting-edge", "dynamic", "vibrant",
         "energetic", "fresh"],
        ("#6366f1", "#0f172a", "#22d3ee", "#0f172a", "#ffffff"),
        ("sans-serif", "sans-serif", "black"),
        ("gradient", "comfortable", "glass"),
        "bold and innovative with strong visual impact",
    ),
    _preset(
        "warm-professional", "Warm Professional",
        ["professional", "reliable", "trusted", "established", "traditional", "family", "local",
         "friendly", "warm"],
        ("#ea580c", "#1c1917", "#fbbf24", "#ffffff", "#1c1917"),
        ("sans-serif", "sans-serif", "bold"),
        ("image-overlay", "comfortable", "elevated"),
        "trustworthy and approachable",
    ),
    _preset(
        "natural-organic", "Natural Organic",
        ["natural", "organic", "eco", "sustainable", "green", "wellness", "holistic", "earth", "nature",
         "botanical"],
        ("#166534", "#1c1917", "#a3e635", "#fefce8", "#1c1917"),
        ("serif", "sans-serif", "normal"),
        ("image-overlay", "spacious", "flat"),
        "natural and calming with earthy tones",
    ),
    _preset(
        "soft-feminine", "Soft Feminine",
        ["feminine", "soft", "gentle", "beauty", "spa", "salon", "delicate", "romantic", "blush", "rose"],
        ("#db2777", "#1f2937", "#f9a8d4", "#fdf2f8", "#1f2937"),
        ("serif", "sans-serif", "normal"),
        ("split", "spacious", "elevated"),
        "soft and inviting with elegant touches",
    ),
    _preset(
        "dark-moody", "Dark Moody",
        ["dark", "moody", "edgy", "urban", "industrial", "tattoo", "barber", "masculine", "gritty", "cool"],
        ("#dc2626", "#0a0a0a", "#fafafa", "#0a0a0a", "#fafafa"),
        ("display", "sans-serif", "black"),
        ("image-overlay", "compact", "outlined"),
        "bold and edgy with dark aesthetics",
    ),
    _preset(
        "classic-traditional", "Classic Traditional",
        ["classic", "traditional", "timeless", "heritage", "established", "conservative", "formal",
         "prestigious"],
        ("#1e3a5f", "#0f172a", "#b8860b", "#f8fafc", "#0f172a"),
        ("serif", "serif", "bold"),
        ("minimal", "comfortable", "outlined"),
        "established and trustworthy with classic appeal",
    ),
    _preset(
        "bright-playful", "Bright Playful",
        ["fun", "playful", "bright", "colorful", "kids", "family", "cheerful", "happy", "vibrant"],
        ("#8b5cf6", "#1e1b4b", "#fbbf24", "#ffffff", "#1e1b4b"),
        ("display", "sans-serif", "bold"),
        ("gradient", "comfortable", "elevated"),
        "fun and energetic with bold colors",
    ),
]


# ============================================================================
# CATEGORY BUNDLES
# ============================================================================

UNSPLASH = "https://images.unsplash.com/"
GENERIC_HERO = UNSPLASH + "photo-1486406146926-c627a92ad1ab?w=1920&q=80"
GENERIC_GALLERY = [UNSPLASH + "photo-1497366216548-37526070297c?w=800&q=80"]

CATEGORIES = {
    "cafe": CategoryProfile(
        colors=_palette("#3d2c1f", "#c4784a", "#d4a574", "#fffbf5", "#2d2d2d"),
        heading_font="Playfair Display", body_font="Lato",
        layout=_layout("full-bleed", "transparent", "spacious", "large"),
        tone="warm", copy_style="conversational",
        services=["Coffee", "Breakfast", "Lunch", "Takeaway", "Catering"],
        trust_signals=["Locally Roasted", "Fresh Daily", "Community Focused"],
        must_have_elements=["Menu display", "Opening hours", "Location map", "Contact info", "Social links"],
        call_to_action="View Our Menu",
        tagline="Great coffee, great vibes",
        hero_image=UNSPLASH + "photo-1554118811-1e0d58224f24?w=1920&q=80",
        gallery_images=[
            UNSPLASH + "photo-1495474472287-4d71bcdd2085?w=800&q=80",
            UNSPLASH + "photo-1509042239860-f550ce710b93?w=600&q=80",
            UNSPLASH + "photo-1498804103079-a6351b050096?w=600&q=80",
        ],
        default_style="warm-professional",
        sections=["Menu preview with popular items", "Opening hours, prominently displayed",
                  "Gallery of food and atmosphere"],
    ),
    "restaurant": CategoryProfile(
        colors=_palette("#2d2d2d", "#8b0000", "#d4af37", "#faf8f5", "#1a1a1a"),
        heading_font="Cormorant Garamond", body_font="Open Sans",
        layout=_layout("full-bleed", "transparent", "spacious", "large"),
        tone="elegant", copy_style="storytelling",
        services=["Dine In", "Takeaway", "Catering", "Private Events"],
        trust_signals=["Fresh Produce", "Award Winning", "Experienced Chef"],
        must_have_elements=["Menu/Menu link", "Booking widget", "Opening hours", "Location", "Gallery"],
        call_to_action="Book a Table",
        tagline="Unforgettable dining experiences",
        hero_image=UNSPLASH + "photo-1517248135467-4c7edcad34c4?w=1920&q=80",
        gallery_images=[
            UNSPLASH + "photo-1414235077428-338989a2e8c0?w=800&q=80",
            UNSPLASH + "photo-1504674900247-0877df9cc836?w=600&q=80",
            UNSPLASH + "photo-1476224203421-9ac39bcb3327?w=600&q=80",
        ],
        default_style="warm-professional",
        sections=["Menu section or link to the full menu", "Reservation call to action",
                  "Gallery of food and ambiance", "Chef or story section"],
    ),
    "fitness": CategoryProfile(
        colors=_palette("#1a1a1a", "#ef4444", "#22c55e", "#ffffff", "#1a1a1a"),
        heading_font="Oswald", body_font="Roboto",
        layout=_layout("split", "fixed", "moderate", "grid"),
        tone="bold", copy_style="direct",
        services=["Personal Training", "Group Classes", "Gym Access", "Nutrition"],
        trust_signals=["Certified Trainers", "Modern Equipment", "Flexible Hours"],
        must_have_elements=["Class schedule", "Pricing", "Location", "Trainer profiles", "Contact form"],
        call_to_action="Start Your Journey",
        tagline="Transform your life",
        hero_image=UNSPLASH + "photo-1534438327276-14e5300c3a48?w=1920&q=80",
        gallery_images=[
            UNSPLASH + "photo-1571019613454-1cb2f99b2d8b?w=800&q=80",
            UNSPLASH + "photo-1517836357463-d25dfeac3438?w=600&q=80",
            UNSPLASH + "photo-1549060279-7e168fcee0c2?w=600&q=80",
        ],
        default_style="modern-bold",
        sections=["Classes and programs", "Trainer profiles", "Membership options",
                  "Transformation gallery"],
    ),
    "beauty": CategoryProfile(
        colors=_palette("#2d2d2d", "#d4a574", "#f5e6d3", "#faf8f5", "#1a1a1a"),
        heading_font="Playfair Display", body_font="Montserrat",
        layout=_layout("minimal", "simple", "spacious", "masonry"),
        tone="elegant", copy_style="conversational",
        services=["Hair", "Nails", "Facials", "Waxing", "Makeup"],
        trust_signals=["Qualified Stylists", "Premium Products", "Hygienic Standards"],
        must_have_elements=["Services list", "Booking button", "Gallery", "Team profiles", "Contact"],
        call_to_action="Book Now",
        tagline="Where beauty meets expertise",
        hero_image=UNSPLASH + "photo-1560066984-138dadb4c035?w=1920&q=80",
        gallery_images=[
            UNSPLASH + "photo-1522337360788-8b13dee7a37e?w=800&q=80",
            UNSPLASH + "photo-1487412947147-5cebf100ffc2?w=600&q=80",
            UNSPLASH + "photo-1519699047748-de8e457a634e?w=600&q=80",
        ],
        default_style="soft-feminine",
        sections=["Services menu with descriptions", "Booking call to action throughout",
                  "Stylist and therapist profiles", "Portfolio gallery"],
    ),
    "legal": CategoryProfile(
        colors=_palette("#1e3a5f", "#94a3b8", "#d4af37", "#f8fafc", "#1a1a1a"),
        heading_font="Libre Baskerville", body_font="Source Sans Pro",
        layout=_layout("minimal", "fixed", "moderate", "minimal"),
        tone="professional", copy_style="formal",
        services=["Consultations", "Contracts", "Disputes", "Compliance"],
        trust_signals=["Licensed", "Confidential", "Fixed Fee Options"],
        must_have_elements=["Services", "Team credentials", "Contact form", "Location", "Testimonials"],
        call_to_action="Get a Consultation",
        tagline="Legal solutions you can trust",
        hero_image=UNSPLASH + "photo-1589829545856-d10d557cf95f?w=1920&q=80",
        gallery_images=[
            UNSPLASH + "photo-1521791055366-0d553872125f?w=800&q=80",
            UNSPLASH + "photo-1560250097-0b93528c311a?w=600&q=80",
        ],
        default_style="classic-traditional",
        sections=["Practice areas", "Lawyer profiles with credentials", "Case results",
                  "Frequently asked questions"],
    ),
    "construction": CategoryProfile(
        colors=_palette("#1a1a1a", "#c5a572", "#f59e0b", "#ffffff", "#1a1a1a"),
        heading_font="Bebas Neue", body_font="Open Sans",
        layout=_layout("full-bleed", "fixed", "moderate", "grid"),
        tone="professional", copy_style="direct",
        services=["Fitouts", "Renovations", "Project Management", "Design"],
        trust_signals=["Licensed Builder", "Fully Insured", "Fixed Price Quotes"],
        must_have_elements=["Services", "Portfolio", "Contact form", "About/credentials", "Testimonials"],
        call_to_action="Get a Free Quote",
        tagline="Building excellence",
        hero_image=UNSPLASH + "photo-1503387762-592deb58ef4e?w=1920&q=80",
        gallery_images=[
            UNSPLASH + "photo-1504307651254-35680f356dfd?w=800&q=80",
            UNSPLASH + "photo-1486406146926-c627a92ad1ab?w=600&q=80",
            UNSPLASH + "photo-1541888946425-d81bb19240f5?w=600&q=80",
        ],
        default_style="warm-professional",
        sections=["Project portfolio", "How we work", "Licences and insurance",
                  "Free quote form"],
    ),
    "plumber": CategoryProfile(
        colors=_palette("#1e3a5f", "#f59e0b", "#3b82f6", "#ffffff", "#1a1a1a"),
        heading_font="Montserrat", body_font="Open Sans",
        layout=_layout("split", "fixed", "compact", "minimal"),
        tone="professional", copy_style="direct",
        services=["Emergency Repairs", "Hot Water", "Blocked Drains", "Maintenance"],
        trust_signals=["Licensed", "24/7 Emergency", "Same Day Service"],
        must_have_elements=["Services", "Emergency contact", "Service areas", "Testimonials", "Pricing info"],
        call_to_action="Call Now",
        tagline="Reliable plumbing, guaranteed",
        hero_image=UNSPLASH + "photo-1581094794329-c8112a89af12?w=1920&q=80",
        gallery_images=[
            UNSPLASH + "photo-1585704032915-c3400ca199e7?w=800&q=80",
            UNSPLASH + "photo-1558618666-fcd25c85cd64?w=600&q=80",
        ],
        default_style="warm-professional",
        sections=["Emergency banner with 24/7 service", "Service areas", "Pricing information",
                  "Call now button that stays visible"],
    ),
    "cleaning": CategoryProfile(
        colors=_palette("#1565c0", "#4caf50", "#81d4fa", "#ffffff", "#1a1a1a"),
        heading_font="Poppins", body_font="Open Sans",
        layout=_layout("split", "fixed", "moderate", "minimal"),
        tone="professional", copy_style="conversational",
        services=["Residential", "Commercial", "End of Lease", "Deep Cleaning"],
        trust_signals=["Insured", "Police Checked", "Satisfaction Guaranteed"],
        must_have_elements=["Services", "Quote form", "Service areas", "Testimonials", "Pricing"],
        call_to_action="Get a Quote",
        tagline="Spotless results, every time",
        hero_image=UNSPLASH + "photo-1581578731548-c64695cc6952?w=1920&q=80",
        gallery_images=[
            UNSPLASH + "photo-1628177142898-93e36e4e3a50?w=800&q=80",
            UNSPLASH + "photo-1563453392212-326f5e854473?w=600&q=80",
        ],
        default_style="natural-organic",
        sections=["Service types", "Quote form", "Service areas", "What every clean includes"],
    ),
    "photographer": CategoryProfile(
        colors=_palette("#000000", "#1a1a1a", "#c9a86c", "#ffffff", "#1a1a1a"),
        heading_font="Cormorant Garamond", body_font="Lato",
        layout=_layout("minimal", "transparent", "spacious", "masonry"),
        tone="elegant", copy_style="storytelling",
        services=["Weddings", "Portraits", "Events", "Commercial"],
        trust_signals=["Published Work", "Fully Insured", "Fast Turnaround"],
        must_have_elements=["Portfolio", "Packages", "About", "Contact form"],
        call_to_action="View Portfolio",
        tagline="Moments worth keeping",
        hero_image=UNSPLASH + "photo-1452587925148-ce544e77e70d?w=1920&q=80",
        gallery_images=[
            UNSPLASH + "photo-1554048612-b6a482bc67e5?w=800&q=80",
            UNSPLASH + "photo-1492691527719-9d1e07e534b4?w=600&q=80",
            UNSPLASH + "photo-1516035069371-29a1b244cc32?w=600&q=80",
        ],
        default_style="luxury-minimal",
        sections=["Portfolio gallery", "Packages", "About the photographer", "Booking enquiry"],
    ),
    "electrician": CategoryProfile(
        colors=_palette("#0f172a", "#facc15", "#3b82f6", "#ffffff", "#1a1a1a"),
        heading_font="Montserrat", body_font="Open Sans",
        layout=_layout("split", "fixed", "compact", "minimal"),
        tone="professional", copy_style="direct",
        services=["Emergency Callouts", "Switchboard Upgrades", "Lighting", "Safety Inspections"],
        trust_signals=["Licensed Electrician", "Fully Insured", "Same Day Service"],
        must_have_elements=["Services", "Emergency contact", "Service areas", "Testimonials", "Pricing info"],
        call_to_action="Get a Free Quote",
        tagline="Safe, reliable electrical work",
        hero_image=GENERIC_HERO,
        gallery_images=GENERIC_GALLERY,
        default_style="modern-bold",
        sections=["Emergency banner", "Service areas", "Licences and safety standards"],
    ),
    "landscaper": CategoryProfile(
        colors=_palette("#166534", "#1c1917", "#a3e635", "#fefce8", "#1c1917"),
        heading_font="Playfair Display", body_font="Lato",
        layout=_layout("full-bleed", "transparent", "spacious", "grid"),
        tone="warm", copy_style="conversational",
        services=["Garden Design", "Lawn Care", "Hardscaping", "Irrigation"],
        trust_signals=["Fully Insured", "Free Quotes", "Local Team"],
        must_have_elements=["Services", "Portfolio", "Service areas", "Quote form"],
        call_to_action="Free Quote",
        tagline="Outdoor spaces that grow with you",
        hero_image=GENERIC_HERO,
        gallery_images=GENERIC_GALLERY,
        default_style="natural-organic",
        sections=["Before and after portfolio", "Seasonal services", "Service areas"],
    ),
    "mechanic": CategoryProfile(
        colors=_palette("#0a0a0a", "#dc2626", "#f59e0b", "#ffffff", "#1a1a1a"),
        heading_font="Oswald", body_font="Roboto",
        layout=_layout("full-bleed", "fixed", "moderate", "grid"),
        tone="professional", copy_style="direct",
        services=["Logbook Servicing", "Brakes", "Diagnostics", "Tyres"],
        trust_signals=["Qualified Mechanics", "Warranty Approved", "Fixed Price Servicing"],
        must_have_elements=["Services", "Booking form", "Opening hours", "Location", "Testimonials"],
        call_to_action="Book Service",
        tagline="Keeping you on the road",
        hero_image=GENERIC_HERO,
        gallery_images=GENERIC_GALLERY,
        default_style="dark-moody",
        sections=["Service menu with pricing", "Online booking", "Workshop location and hours"],
    ),
    "hvac": CategoryProfile(
        colors=_palette("#0c4a6e", "#f97316", "#38bdf8", "#ffffff", "#1a1a1a"),
        heading_font="Montserrat", body_font="Open Sans",
        layout=_layout("split", "fixed", "moderate", "minimal"),
        tone="professional", copy_style="direct",
        services=["Air Conditioning Installation", "Heating", "Repairs", "Maintenance"],
        trust_signals=["Licensed Technicians", "Fully Insured", "Same Day Service"],
        must_have_elements=["Services", "Emergency contact", "Service areas", "Testimonials"],
        call_to_action="Get a Quote",
        tagline="Comfort in every season",
        hero_image=GENERIC_HERO,
        gallery_images=GENERIC_GALLERY,
        default_style="modern-bold",
        sections=["Emergency banner", "Brands serviced", "Service areas"],
    ),
}

ALIASES = {
    "café": "cafe",
    "coffee shop": "cafe",
    "bakery": "cafe",
    "bistro": "restaurant",
    "gym": "fitness",
    "personal trainer": "fitness",
    "yoga": "fitness",
    "salon": "beauty",
    "hairdresser": "beauty",
    "hair salon": "beauty",
    "beautician": "beauty",
    "spa": "beauty",
    "lawyer": "legal",
    "law firm": "legal",
    "solicitor": "legal",
    "builder": "construction",
    "carpenter": "construction",
    "plumbing": "plumber",
    "cleaner": "cleaning",
    "photography": "photographer",
    "electrical": "electrician",
    "landscaping": "landscaper",
    "gardener": "landscaper",
    "auto repair": "mechanic",
    "air conditioning": "hvac",
}

FALLBACK_CATEGORY = CategoryProfile(
    colors=_palette("#1a1a1a", "#6366f1", "#818cf8", "#ffffff", "#1a1a1a"),
    heading_font="Inter", body_font="Inter",
    layout=_layout("split", "fixed", "moderate", "large"),
    tone="professional", copy_style="formal",
    services=["Consultations", "Tailored Solutions", "Ongoing Support"],
    trust_signals=["Quality Service", "Experienced Team", "Customer Focused"],
    must_have_elements=["Services", "Contact", "About", "Location"],
    call_to_action="Get Started",
    tagline="Excellence in every detail",
    hero_image=GENERIC_HERO,
    gallery_images=GENERIC_GALLERY,
    default_style=FALLBACK_STYLE,
)

DEFAULT_CATALOG = Catalog(
    presets={preset.key: preset for preset in STYLE_PRESETS},
    categories=CATEGORIES,
    aliases=ALIASES,
    fallback=FALLBACK_CATEGORY,
)
