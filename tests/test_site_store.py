import json

from brandsite.app.models import GenerationArtifact
from brandsite.app.site_store import LocalSiteStore, slugify


def test_slugify():
    assert slugify('Acme Plumbing') == 'acme-plumbing'
    assert slugify("Café Olé & Co.") == 'cafe-ole-co'
    assert slugify('!!!') == 'site'


def test_save_writes_html_and_record(tmp_path):
    artifact = GenerationArtifact(slug='acme', brief='Brief', html='<html></html>', generation_time=1.5)
    store = LocalSiteStore(tmp_path / 'out')
    assert store.save('acme', artifact) is True

    assert (tmp_path / 'out' / 'acme.html').read_text(encoding='utf-8') == '<html></html>'
    record = json.loads((tmp_path / 'out' / 'acme.json').read_text(encoding='utf-8'))
    assert record['brief'] == 'Brief'
    assert record['html_file'] == 'acme.html'
    assert 'html' not in record
    assert 'saved_at' in record


def test_save_failure_returns_false(tmp_path):
    blocker = tmp_path / 'taken'
    blocker.write_text('not a directory')
    artifact = GenerationArtifact(slug='acme', html='<html></html>')
    assert LocalSiteStore(blocker).save('acme', artifact) is False
