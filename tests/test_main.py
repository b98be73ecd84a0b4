import pytest
from fastapi.testclient import TestClient

from brandsite.agents.brand_fusion import BrandProfileFusionEngine
from brandsite.agents.tools import GenerationError
from brandsite.app import main
from brandsite.app.models import GenerationArtifact

ACME = {
    'business_name': 'Acme Plumbing',
    'category': 'plumber',
    'location': 'Richmond',
    'preferred_colors': ['#1e3a5f', '#f59e0b'],
}


class StubOrchestrator:
    def __init__(self, error=None):
        self.error = error
        self.engine = BrandProfileFusionEngine()

    async def extract(self, data):
        return self.engine.fuse(data)

    async def create_site(self, data, generator):
        if self.error:
            raise self.error
        profile = self.engine.fuse(data)
        return profile, GenerationArtifact(slug='acme-plumbing', brief='brief', html='<html></html>',
                                           generation_time=0.4, saved=True)


@pytest.fixture
def client():
    # No context manager, so the startup hook does not replace the stubs
    return TestClient(main.app)


def test_health(client):
    assert client.get('/health').json() == {'status': 'healthy'}
    assert '/generate' in client.get('/').json()['endpoints']


def test_not_ready_before_startup(client, monkeypatch):
    monkeypatch.setattr(main, 'brand_orchestrator', None)
    assert client.post('/profile', json=ACME).status_code == 503


def test_profile(client, monkeypatch):
    monkeypatch.setattr(main, 'brand_orchestrator', StubOrchestrator())
    response = client.post('/profile', json=ACME)
    assert response.status_code == 200
    body = response.json()
    assert body['sources']['colors'] == 'user'
    assert body['profile']['colors']['primary'] == '#1e3a5f'


def test_profile_rejects_missing_fields(client, monkeypatch):
    monkeypatch.setattr(main, 'brand_orchestrator', StubOrchestrator())
    assert client.post('/profile', json={'business_name': 'Acme'}).status_code == 422


def test_generate_rejects_color_names(client, monkeypatch):
    monkeypatch.setattr(main, 'brand_orchestrator', StubOrchestrator())
    monkeypatch.setattr(main, 'site_generator', object())
    response = client.post('/generate', json=dict(ACME, preferred_colors=['navy', 'gold']))
    assert response.status_code == 422


def test_generate(client, monkeypatch):
    monkeypatch.setattr(main, 'brand_orchestrator', StubOrchestrator())
    monkeypatch.setattr(main, 'site_generator', object())
    response = client.post('/generate', json=ACME)
    assert response.status_code == 200
    body = response.json()
    assert body['slug'] == 'acme-plumbing'
    assert body['saved'] is True
    assert body['html'] == '<html></html>'
    assert body['sources']['fonts'] == 'default'


def test_generate_reports_generation_failure(client, monkeypatch):
    monkeypatch.setattr(main, 'brand_orchestrator', StubOrchestrator(GenerationError('site stage failed')))
    monkeypatch.setattr(main, 'site_generator', object())
    response = client.post('/generate', json=ACME)
    assert response.status_code == 502
    assert 'site stage failed' in response.json()['detail']


def test_generate_reports_unexpected_errors(client, monkeypatch):
    monkeypatch.setattr(main, 'brand_orchestrator', StubOrchestrator(ValueError('bad')))
    monkeypatch.setattr(main, 'site_generator', object())
    assert client.post('/generate', json=ACME).status_code == 500
