"""Heuristic brand signals from a page's raw HTML."""
import html as html_lib
import re
from typing import List, Optional
from urllib.parse import parse_qs, urljoin, urlparse
from bs4 import BeautifulSoup

from brandsite.agents.color_utils import lightness, parse_color_value, saturation
from brandsite.agents.tools import PageFetcher
from brandsite.app.logger import logger
from brandsite.app.models import (
    MarkupColors,
    MarkupContent,
    MarkupFonts,
    MarkupImages,
    MarkupLayout,
    MarkupSignalSet,
    PageMeta,
)

# Greys and pure black/white say nothing about a brand
BLOCKED_COLORS = {
    '#000000', '#ffffff', '#333333', '#666666', '#999999',
    '#cccccc', '#f5f5f5', '#fafafa',
}

COLOR_TOKEN_PATTERN = re.compile(
    r'(?<![&\w])#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b'
    r'|rgba?\(\s*\d{1,3}\s*,\s*\d{1,3}\s*,\s*\d{1,3}'
)
FONT_FAMILY_PATTERN = re.compile(
    r'font-family\s*:\s*((?:"[^"]*"|\'[^\']*\'|[^;}"\'<>])+)', re.IGNORECASE
)
GOOGLE_FONTS_PATTERN = re.compile(r'fonts\.googleapis\.com/css2?\?([^"\'\s>]+)', re.IGNORECASE)

GENERIC_FONTS = {
    'sans-serif', 'serif', 'monospace', 'cursive', 'fantasy', 'system-ui',
    'inherit', 'initial', 'unset',
}
HEADING_FONT_HINTS = ('bold', 'display', 'heading', 'title')

TRUST_VOCABULARY = [
    'years experience', 'licensed', 'insured', 'guarantee',
    'award', 'certified', 'trusted', 'local',
]

MAX_PALETTE = 10
MAX_FONTS = 5
MAX_SERVICES = 10
MAX_CTAS = 5
MAX_IMAGES = 20
MAX_GALLERY = 10


def normalize_url(url: str) -> str:
    """Give scheme-less input an https:// prefix."""
    url = url.strip()
    if not url.startswith('http'):
        url = 'https://' + re.sub(r'^www\.', '', url)
    return url


# ============================================================================
# COLORS
# ============================================================================

def extract_colors(html: str) -> List[str]:
    """Brand color candidates as lowercase #rrggbb in first-seen order."""
    colors = []
    for match in COLOR_TOKEN_PATTERN.finditer(html or ''):
        color = parse_color_value(match.group(0))
        if color and color not in colors:
            colors.append(color)

    filtered = [c for c in colors if c not in BLOCKED_COLORS]
    return filtered or colors


def classify_colors(colors: List[str]) -> MarkupColors:
    """Assign palette roles by saturation and lightness."""
    if not colors:
        return MarkupColors()

    by_saturation = sorted(colors, key=saturation, reverse=True)
    primary = by_saturation[0]
    secondary = by_saturation[1] if len(by_saturation) > 1 else primary
    accent = next((c for c in by_saturation if saturation(c) > 0.5), primary)

    return MarkupColors(
        palette=colors[:MAX_PALETTE],
        primary=primary,
        secondary=secondary,
        accent=accent,
        background=max(colors, key=lightness),
        text=min(colors, key=lightness),
    )


# ============================================================================
# FONTS
# ============================================================================

def _clean_font_name(name: str) -> Optional[str]:
    name = name.replace('!important', '').strip().strip('"\'').strip()
    if not name or name.lower() in GENERIC_FONTS:
        return None
    if name.lower().startswith('var(') or name.startswith('-'):
        return None
    return name


def extract_fonts(html: str) -> MarkupFonts:
    """Fonts from font-family declarations and Google Fonts links."""
    html = html or ''
    found = []

    for match in FONT_FAMILY_PATTERN.finditer(html):
        for part in match.group(1).split(','):
            font = _clean_font_name(part)
            if font:
                found.append(font)

    for match in GOOGLE_FONTS_PATTERN.finditer(html):
        query = html_lib.unescape(match.group(1))
        for family in parse_qs(query).get('family', []):
            for part in family.split('|'):
                font = _clean_font_name(part.split(':')[0])
                if font:
                    found.append(font)

    fonts = []
    seen = set()
    for font in found:
        if font.lower() not in seen:
            seen.add(font.lower())
            fonts.append(font)

    if not fonts:
        return MarkupFonts()

    def is_heading_font(font: str) -> bool:
        return any(hint in font.lower() for hint in HEADING_FONT_HINTS)

    heading = next((f for f in fonts if is_heading_font(f)), fonts[0])
    body = next((f for f in fonts if not is_heading_font(f)), fonts[1] if len(fonts) > 1 else fonts[0])
    return MarkupFonts(heading=heading, body=body, detected=fonts[:MAX_FONTS])


# ============================================================================
# LAYOUT
# ============================================================================

def analyze_layout(html: str) -> MarkupLayout:
    """Keyword classification of hero, navigation and overall style."""
    lower = (html or '').lower()
    section_count = lower.count('<section')

    if 'hero' in lower and 'video' in lower:
        hero_style = 'video'
    elif 'slider' in lower or 'carousel' in lower:
        hero_style = 'slider'
    elif '100vh' in lower or 'full-height' in lower:
        hero_style = 'full-bleed'
    elif 'split' in lower or 'two-column' in lower:
        hero_style = 'split'
    else:
        hero_style = 'minimal'

    # A mobile menu marker outranks a fixed bar
    if 'hamburger' in lower or 'mobile-menu' in lower:
        nav_style = 'hamburger'
    elif 'fixed' in lower and 'nav' in lower:
        nav_style = 'fixed'
    else:
        nav_style = 'static'

    if 'minimal' in lower or section_count < 5:
        style = 'minimal'
    elif 'bold' in lower or 'vibrant' in lower:
        style = 'bold'
    elif 'corporate' in lower or 'professional' in lower:
        style = 'corporate'
    elif 'creative' in lower or 'portfolio' in lower:
        style = 'creative'
    elif 'warm' in lower or 'friendly' in lower:
        style = 'warm'
    else:
        style = 'modern'

    return MarkupLayout(
        style=style,
        has_hero_image='hero' in lower or 'banner' in lower,
        hero_style=hero_style,
        nav_style=nav_style,
        section_count=section_count,
    )


# ============================================================================
# CONTENT, IMAGES, META
# ============================================================================

def _meta_content(soup: BeautifulSoup, name: str) -> Optional[str]:
    tag = soup.find('meta', attrs={'name': name}) or soup.find('meta', attrs={'property': f'og:{name}'})
    if tag:
        content = (tag.get('content') or '').strip()
        return content or None
    return None


def extract_meta(html: str, soup: BeautifulSoup = None) -> PageMeta:
    if soup is None:
        soup = BeautifulSoup(html or '', 'html.parser')

    title = None
    if soup.title and soup.title.get_text(strip=True):
        title = soup.title.get_text(strip=True)
    else:
        title = _meta_content(soup, 'title')

    return PageMeta(title=title, description=_meta_content(soup, 'description'))


def extract_content(html: str, soup: BeautifulSoup = None) -> MarkupContent:
    """Tagline, services, trust phrases and CTA labels."""
    if soup is None:
        soup = BeautifulSoup(html or '', 'html.parser')

    tagline = None
    h1 = soup.find('h1')
    if h1 and h1.get_text(strip=True):
        tagline = h1.get_text(' ', strip=True)

    services = []
    for tag in soup.find_all('h3') + soup.find_all('strong'):
        text = tag.get_text(' ', strip=True)
        if 3 < len(text) < 50 and text not in services:
            services.append(text)
        if len(services) >= MAX_SERVICES:
            break

    page_text = soup.get_text(' ', strip=True).lower()
    trust_signals = [phrase[0].upper() + phrase[1:] for phrase in TRUST_VOCABULARY if phrase in page_text]

    cta_text = []
    for tag in soup.find_all(['a', 'button'], class_=re.compile(r'btn|button|cta', re.IGNORECASE)):
        text = tag.get_text(' ', strip=True)
        if 2 < len(text) < 30 and text not in cta_text:
            cta_text.append(text)
        if len(cta_text) >= MAX_CTAS:
            break

    return MarkupContent(
        tagline=tagline,
        description=_meta_content(soup, 'description'),
        services=services,
        trust_signals=trust_signals,
        cta_text=cta_text,
    )


def resolve_image_url(src: str, page_url: str) -> Optional[str]:
    """Absolute http(s) URL for an <img> source, or None."""
    src = (src or '').strip()
    if not src or src.startswith('data:'):
        return None
    if src.startswith('//'):
        src = 'https:' + src
    elif not src.startswith('http'):
        src = urljoin(page_url, src)
    if urlparse(src).scheme not in ('http', 'https'):
        return None
    return src


def _img_markers(img) -> str:
    classes = img.get('class') or []
    if isinstance(classes, str):
        classes = [classes]
    return ' '.join(classes + [img.get('id') or '']).lower()


def extract_images(html: str, page_url: str, soup: BeautifulSoup = None) -> MarkupImages:
    """Logo, hero and gallery image URLs."""
    if soup is None:
        soup = BeautifulSoup(html or '', 'html.parser')

    images = []
    logo = None
    hero = None
    for img in soup.find_all('img'):
        url = resolve_image_url(img.get('src') or img.get('data-src') or '', page_url)
        if not url:
            continue

        markers = _img_markers(img)
        if logo is None and ('logo' in markers or 'logo' in (img.get('alt') or '').lower()):
            logo = url
        if hero is None and 'hero' in markers:
            hero = url

        if url not in images and len(images) < MAX_IMAGES:
            images.append(url)

    if hero is None and images:
        hero = images[0]

    return MarkupImages(logo=logo, hero=hero, gallery=images[:MAX_GALLERY])


def analyze_markup(html: str, url: str) -> MarkupSignalSet:
    """Run every markup heuristic over one document."""
    soup = BeautifulSoup(html or '', 'html.parser')
    return MarkupSignalSet(
        url=url,
        colors=classify_colors(extract_colors(html)),
        fonts=extract_fonts(html),
        layout=analyze_layout(html),
        content=extract_content(html, soup=soup),
        images=extract_images(html, url, soup=soup),
        meta=extract_meta(html, soup=soup),
    )


class MarkupSignalExtractor:
    """Fetch a page and turn its markup into brand signals."""

    def __init__(self, fetcher: PageFetcher = None):
        self.fetcher = fetcher or PageFetcher()

    def analyze(self, url: Optional[str]) -> Optional[MarkupSignalSet]:
        """Signals for the page at url, or None when it can't be read."""
        if not url or not url.strip():
            return None

        target = normalize_url(url)
        logger.info(f"Analyzing website: {target}")
        html = self.fetcher.fetch(target)
        if not html:
            return None

        try:
            signals = analyze_markup(html, target)
        except Exception as e:
            logger.error(f"Markup analysis failed for {target}: {e}", exc_info=True)
            return None

        logger.info(
            f"✓ {target}: {len(signals.colors.palette)} colors, "
            f"{len(signals.fonts.detected)} fonts, {len(signals.images.gallery)} images"
        )
        return signals
