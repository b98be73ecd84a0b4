import itertools

from brandsite.agents.markup_analyzer import (
    MarkupSignalExtractor,
    analyze_layout,
    analyze_markup,
    classify_colors,
    extract_colors,
    extract_content,
    extract_fonts,
    extract_images,
    extract_meta,
    normalize_url,
    resolve_image_url,
)
from tests.fakes import PLUMBER_SITE, FakeFetcher


def test_color_roles_ignore_blocked_colors_and_input_order():
    for order in itertools.permutations(['#ffffff', '#000000', '#ff0055', '#222222']):
        html = ' '.join(f'<div style="color: {c}">x</div>' for c in order)
        colors = classify_colors(extract_colors(html))
        assert colors.primary == '#ff0055'
        assert colors.background == '#ff0055'
        assert colors.text == '#222222'
        assert colors.accent == '#ff0055'


def test_extract_colors_normalizes_and_dedupes():
    html = '<style>a{color:#ABC} b{color:#aabbcc} i{color: rgba(255, 0, 85, 0.5)}</style>'
    assert extract_colors(html) == ['#aabbcc', '#ff0055']


def test_extract_colors_keeps_blocked_colors_when_nothing_else_found():
    assert extract_colors('<p style="color:#fff;background:#000000">') == ['#ffffff', '#000000']


def test_extract_colors_skips_html_entities():
    assert extract_colors('<p>&#123; price</p>') == []


def test_classify_colors_without_colors_leaves_roles_empty():
    colors = classify_colors([])
    assert colors.primary is None
    assert colors.palette == []


def test_secondary_falls_back_to_primary_for_single_color():
    colors = classify_colors(['#3366cc'])
    assert colors.secondary == '#3366cc'


def test_extract_fonts_from_declarations_and_google_links():
    fonts = extract_fonts(PLUMBER_SITE)
    assert fonts.detected == ['Lato', 'Roboto Slab']
    assert fonts.body == 'Lato'
    assert fonts.heading == 'Lato'


def test_heading_font_prefers_display_names():
    html = "<style>h1{font-family:'Playfair Display', serif} p{font-family: Inter, system-ui}</style>"
    fonts = extract_fonts(html)
    assert fonts.heading == 'Playfair Display'
    assert fonts.body == 'Inter'


def test_extract_fonts_filters_generic_families_and_variables():
    fonts = extract_fonts('<style>p{font-family: var(--body), -apple-system, sans-serif}</style>')
    assert fonts.detected == []
    assert fonts.heading is None


def test_layout_classification():
    layout = analyze_layout(PLUMBER_SITE)
    assert layout.section_count == 3
    assert layout.hero_style == 'split'
    assert layout.nav_style == 'fixed'
    assert layout.style == 'minimal'
    assert layout.has_hero_image is True


def test_layout_hero_video_and_slider():
    assert analyze_layout('<div class="hero"><video></video></div>').hero_style == 'video'
    assert analyze_layout('<div class="carousel"></div>').hero_style == 'slider'
    assert analyze_layout('<div style="height:100vh"></div>').hero_style == 'full-bleed'
    assert analyze_layout('<button class="hamburger"></button>').nav_style == 'hamburger'


def test_mobile_menu_outranks_fixed_nav():
    html = '<nav class="navbar fixed-top"><button class="hamburger"></button></nav>'
    assert analyze_layout(html).nav_style == 'hamburger'
    assert analyze_layout('<nav class="fixed"><div class="mobile-menu"></div></nav>').nav_style == 'hamburger'
    assert analyze_layout('<nav class="fixed-top"></nav>').nav_style == 'fixed'


def test_layout_style_for_many_sections():
    html = '<section></section>' * 6 + '<p>corporate</p>'
    assert analyze_layout(html).style == 'corporate'


def test_extract_content():
    content = extract_content(PLUMBER_SITE)
    assert content.tagline == 'Plumbing done right'
    assert content.description.startswith('Friendly local plumbers')
    assert content.services == ['Blocked Drains', 'Hot Water Systems', 'Gas Fitting']
    assert content.trust_signals == ['Years experience', 'Licensed', 'Insured', 'Trusted', 'Local']
    assert content.cta_text == ['Book a plumber']


def test_extract_images_resolves_sources():
    images = extract_images(PLUMBER_SITE, 'https://richmondpipes.com.au/')
    assert images.logo == 'https://richmondpipes.com.au/img/logo.png'
    assert images.hero == 'https://cdn.example.com/hero.jpg'
    assert images.gallery == [
        'https://richmondpipes.com.au/img/logo.png',
        'https://cdn.example.com/hero.jpg',
        'https://richmondpipes.com.au/gallery/job1.jpg',
    ]


def test_resolve_image_url():
    assert resolve_image_url('data:image/png;base64,AA', 'https://a.com') is None
    assert resolve_image_url('//cdn.a.com/x.jpg', 'https://a.com') == 'https://cdn.a.com/x.jpg'
    assert resolve_image_url('javascript:void(0)', 'https://a.com') is None


def test_extract_meta():
    meta = extract_meta(PLUMBER_SITE)
    assert meta.title == 'Richmond Pipes | Local Plumbers'


def test_normalize_url():
    assert normalize_url('www.acme.com.au') == 'https://acme.com.au'
    assert normalize_url('http://www.acme.com.au') == 'http://www.acme.com.au'


def test_analyze_markup_fixture():
    signals = analyze_markup(PLUMBER_SITE, 'https://richmondpipes.com.au/')
    assert signals.colors.primary == '#ff7a00'
    assert signals.colors.text == '#222222'
    assert signals.meta.description == signals.content.description


def test_extractor_returns_none_for_unreachable_page():
    extractor = MarkupSignalExtractor(FakeFetcher())
    assert extractor.analyze('acme.com.au') is None
    assert extractor.analyze('') is None
    assert extractor.analyze(None) is None


def test_extractor_fetches_normalized_url():
    fetcher = FakeFetcher({'https://richmondpipes.com.au': PLUMBER_SITE})
    signals = MarkupSignalExtractor(fetcher).analyze('www.richmondpipes.com.au')
    assert fetcher.requested == ['https://richmondpipes.com.au']
    assert signals.url == 'https://richmondpipes.com.au'
    assert signals.fonts.detected
