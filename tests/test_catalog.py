import pytest

from brandsite.agents.color_utils import lightness, parse_color_value, shift_lightness
from brandsite.app.catalog import DEFAULT_CATALOG, FALLBACK_CATEGORY


def test_resolve_known_alias_and_unknown_categories():
    assert DEFAULT_CATALOG.resolve('Plumber').call_to_action == 'Call Now'
    assert DEFAULT_CATALOG.resolve(' plumbing ') is DEFAULT_CATALOG.categories['plumber']
    assert DEFAULT_CATALOG.resolve('Underwater Welding') is FALLBACK_CATEGORY
    assert DEFAULT_CATALOG.resolve('') is FALLBACK_CATEGORY


def test_every_category_points_at_a_real_preset():
    for name, bundle in DEFAULT_CATALOG.categories.items():
        assert bundle.default_style in DEFAULT_CATALOG.presets, name
        assert bundle.services and bundle.trust_signals and bundle.gallery_images, name


def test_aliases_point_at_real_categories():
    for alias, target in DEFAULT_CATALOG.aliases.items():
        assert target in DEFAULT_CATALOG.categories, alias


def test_unknown_preset_key_falls_back():
    assert DEFAULT_CATALOG.preset('nope').key == 'warm-professional'


def test_parse_color_value():
    assert parse_color_value('#ABC') == '#aabbcc'
    assert parse_color_value('rgb(300, 0, 10)') == '#ff000a'
    assert parse_color_value('#12') is None
    assert parse_color_value('teal') is None


def test_shift_lightness_moves_away_from_the_extremes():
    assert lightness(shift_lightness('#1e3a5f')) > lightness('#1e3a5f')
    assert lightness(shift_lightness('#f5f5f5')) < lightness('#f5f5f5')


def test_catalog_tables_cannot_be_edited():
    with pytest.raises(TypeError):
        DEFAULT_CATALOG.presets['warm-professional'] = DEFAULT_CATALOG.presets['dark-moody']
    with pytest.raises(TypeError):
        DEFAULT_CATALOG.aliases['plumbing'] = 'cafe'
    assert DEFAULT_CATALOG.canonical('plumbing') == 'plumber'
