from brandsite.agents.style_matcher import StylePresetMatcher
from brandsite.app.catalog import DEFAULT_CATALOG, Catalog


def catalog_with(**keywords):
    """Small catalog whose presets differ only by name and keywords."""
    base = DEFAULT_CATALOG.presets['warm-professional']
    presets = {
        key: base.model_copy(update={'key': key, 'name': key.title(), 'keywords': words})
        for key, words in keywords.items()
    }
    return Catalog(
        presets=presets,
        categories=dict(DEFAULT_CATALOG.categories),
        aliases=dict(DEFAULT_CATALOG.aliases),
        fallback=DEFAULT_CATALOG.fallback,
    )


def test_score_is_total_keyword_length():
    preset = DEFAULT_CATALOG.presets['luxury-minimal']
    assert StylePresetMatcher.score(preset, 'Something ELEGANT and premium') == len('elegant') + len('premium')
    assert StylePresetMatcher.score(preset, 'cheap and cheerful') == 0


def test_one_long_keyword_beats_two_short_ones():
    matcher = StylePresetMatcher(catalog_with(cosy=['cozy', 'calm'], polished=['sophisticated']))
    preset, score = matcher.best_match('cozy, calm and sophisticated')
    assert preset.key == 'polished'
    assert score == 13


def test_ties_go_to_the_earlier_preset():
    matcher = StylePresetMatcher(catalog_with(first=['navy'], second=['gold']))
    preset, score = matcher.best_match('navy and gold')
    assert preset.key == 'first'
    assert score == 4


def test_no_preferences_means_no_match():
    matcher = StylePresetMatcher()
    assert matcher.best_match(None) == (None, 0)
    assert matcher.best_match('   ') == (None, 0)
    assert matcher.best_match('quick turnaround please') == (None, 0)


def test_match_falls_back_to_category_default():
    matcher = StylePresetMatcher()
    assert matcher.match(None, 'beauty').key == 'soft-feminine'
    assert matcher.match('', 'hairdresser').key == 'soft-feminine'
    assert matcher.match('', 'underwater welding').key == 'warm-professional'


def test_match_prefers_client_words():
    matcher = StylePresetMatcher()
    assert matcher.match('dark industrial barber vibe', 'beauty').key == 'dark-moody'
