"""Brand signals from a social profile's bio and recent posts."""
import re
from collections import Counter
from typing import Any, Dict, List, Optional

from brandsite.agents.tools import SocialDataClient
from brandsite.app.logger import logger
from brandsite.app.models import (
    SocialBrand,
    SocialContent,
    SocialMedia,
    SocialProfile,
    SocialSignalSet,
)

# Checked in order, first family that matches wins
TONE_PATTERNS = [
    ('luxurious', re.compile(r'luxury|premium|exclusive|elegant|sophisticated')),
    ('fun', re.compile(r'fun|enjoy|love|happy|excited|🎉|😊')),
    ('minimal', re.compile(r'minimal|simple|clean|modern')),
    ('warm', re.compile(r'warm|friendly|family|community|care')),
    ('casual', re.compile(r'chill|casual|relax|easy')),
]

AESTHETIC_PATTERNS = [
    ('bright', re.compile(r'bright')),
    ('moody', re.compile(r'dark|moody')),
    ('colorful', re.compile(r'colorful|colourful')),
    ('natural', re.compile(r'natural')),
    ('urban', re.compile(r'urban')),
    ('vintage', re.compile(r'vintage')),
    ('modern', re.compile(r'modern')),
]

COLOR_WORDS = {
    'black': '#000000',
    'white': '#ffffff',
    'gold': '#d4af37',
    'rose': '#ff007f',
    'pink': '#ffc0cb',
    'blue': '#3b82f6',
    'navy': '#1e3a5f',
    'green': '#22c55e',
    'teal': '#14b8a6',
    'red': '#ef4444',
    'orange': '#f97316',
    'yellow': '#eab308',
    'purple': '#8b5cf6',
    'brown': '#92400e',
    'beige': '#f5f5dc',
    'cream': '#fffdd0',
}
NEUTRAL_COLORS = ['#1a1a1a', '#ffffff']

THEME_KEYWORDS = {
    'food': ['coffee', 'food', 'eat', 'taste', 'delicious', 'menu', 'dish'],
    'fitness': ['workout', 'gym', 'fitness', 'training', 'health', 'exercise'],
    'beauty': ['beauty', 'skin', 'hair', 'makeup', 'glow', 'treatment'],
    'service': ['service', 'quality', 'professional', 'expert', 'team'],
    'local': ['local', 'community', 'neighborhood', 'neighbourhood', 'area', 'melbourne', 'sydney'],
    'sustainability': ['sustainable', 'eco', 'green', 'organic', 'natural'],
}

HASHTAG_PATTERN = re.compile(r'#\w+')
MAX_HASHTAGS = 10
MEDIA_COUNT = 12


def detect_tone(text: str) -> str:
    lower = (text or '').lower()
    for tone, pattern in TONE_PATTERNS:
        if pattern.search(lower):
            return tone
    return 'professional'


def describe_aesthetic(text: str) -> str:
    lower = (text or '').lower()
    keywords = [name for name, pattern in AESTHETIC_PATTERNS if pattern.search(lower)]
    return ', '.join(keywords) if keywords else 'clean and professional'


def detect_colors(text: str) -> List[str]:
    """Hex values for color words mentioned in the text, never empty."""
    lower = (text or '').lower()
    colors = [hex_value for word, hex_value in COLOR_WORDS.items() if re.search(rf'\b{word}\b', lower)]
    return colors or list(NEUTRAL_COLORS)


def rank_hashtags(captions: List[str]) -> List[str]:
    """Most used hashtags, ties in first-seen order."""
    tags = [tag.lower() for caption in captions for tag in HASHTAG_PATTERN.findall(caption or '')]
    return [tag for tag, _ in Counter(tags).most_common(MAX_HASHTAGS)]


def detect_themes(captions: List[str]) -> List[str]:
    text = ' '.join(captions).lower()
    return [theme for theme, words in THEME_KEYWORDS.items() if any(word in text for word in words)]


def detect_posting_style(captions: List[str]) -> str:
    text = ' '.join(captions).lower()
    if any(word in text for word in ('product', 'shop', 'buy')):
        return 'product-focused'
    if 'lifestyle' in text or 'day in' in text:
        return 'lifestyle'
    if any(word in text for word in ('behind', 'team', 'making')):
        return 'behind-scenes'
    return 'mixed'


def _as_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def parse_profile(data: Dict[str, Any]) -> SocialProfile:
    return SocialProfile(
        display_name=data.get('full_name') or '',
        bio=data.get('biography') or '',
        website=data.get('external_url') or None,
        follower_count=_as_int(data.get('follower_count')),
        post_count=_as_int(data.get('media_count')),
        avatar_url=data.get('profile_pic_url_hd') or data.get('profile_pic_url') or None,
    )


def parse_media(items: List[Dict[str, Any]]) -> List[SocialMedia]:
    """Posts with an image, ranked by likes (feed order breaks ties)."""
    media = []
    for item in items:
        versions = (item.get('image_versions') or {}).get('items') or []
        url = (versions[0].get('url') if versions and isinstance(versions[0], dict) else None) or item.get('thumbnail_url')
        if not url:
            continue
        caption = item.get('caption')
        caption_text = caption.get('text', '') if isinstance(caption, dict) else (caption or '')
        media.append(SocialMedia(url=url, caption=caption_text or '', likes=_as_int(item.get('like_count'))))
    return sorted(media, key=lambda post: post.likes, reverse=True)


class SocialSignalExtractor:
    """Turn a social handle into tone, color and content signals."""

    def __init__(self, client: SocialDataClient = None):
        self.client = client or SocialDataClient()

    def analyze(self, handle: Optional[str]) -> Optional[SocialSignalSet]:
        """Signals for the handle, or None when the profile is unavailable."""
        handle = (handle or '').strip().lstrip('@')
        if not handle:
            return None
        if not self.client.enabled:
            logger.info("No RAPIDAPI_KEY configured, skipping social analysis")
            return None

        logger.info(f"Analyzing social profile: @{handle}")
        data = self.client.get_profile(handle)
        if not data:
            return None

        profile = parse_profile(data)
        media = parse_media(self.client.get_recent_media(handle, MEDIA_COUNT))
        captions = [post.caption for post in media]
        all_text = ' '.join([profile.bio] + captions)

        signals = SocialSignalSet(
            handle=handle,
            profile=profile,
            brand=SocialBrand(
                colors=detect_colors(all_text),
                tone=detect_tone(all_text),
                aesthetic=describe_aesthetic(all_text),
            ),
            content=SocialContent(
                hashtags=rank_hashtags(captions),
                themes=detect_themes(captions),
                posting_style=detect_posting_style(captions),
            ),
            media=media,
        )
        logger.info(f"✓ @{handle}: tone {signals.brand.tone}, {len(media)} posts")
        return signals
