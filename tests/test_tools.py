import asyncio
from unittest.mock import MagicMock

import pytest
import requests
from langchain_core.messages import AIMessage

from brandsite.agents.tools import (
    GenerationError,
    PageFetcher,
    SearchTool,
    SocialDataClient,
    TextGenerator,
    first_text_block,
)
from brandsite.app.config import Settings
from tests.fakes import FakeChatModel, RecordingFactory


def fake_response(status=200, content_type='text/html; charset=utf-8', text='<html></html>', payload=None):
    response = MagicMock()
    response.ok = status < 400
    response.status_code = status
    response.headers = {'Content-Type': content_type}
    response.text = text
    response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f'{status}')
    return response


def test_fetch_returns_html(settings):
    fetcher = PageFetcher(settings)
    fetcher.session = MagicMock()
    fetcher.session.get.return_value = fake_response(text='<html>ok</html>')
    assert fetcher.fetch('https://acme.com') == '<html>ok</html>'
    fetcher.session.get.assert_called_once_with('https://acme.com', timeout=10.0, allow_redirects=True)


@pytest.mark.parametrize('response', [
    fake_response(status=404),
    fake_response(content_type='application/pdf'),
])
def test_fetch_rejects_errors_and_non_html(settings, response):
    fetcher = PageFetcher(settings)
    fetcher.session = MagicMock()
    fetcher.session.get.return_value = response
    assert fetcher.fetch('https://acme.com') is None


def test_fetch_swallows_network_errors(settings):
    fetcher = PageFetcher(settings)
    fetcher.session = MagicMock()
    fetcher.session.get.side_effect = requests.ConnectionError('refused')
    assert fetcher.fetch('https://acme.com') is None


def test_fetcher_sends_user_agent(settings):
    assert PageFetcher(settings).session.headers['User-Agent'] == settings.user_agent


def test_search_disabled_without_key(settings):
    tool = SearchTool(settings)
    tool.session = MagicMock()
    assert tool.enabled is False
    assert tool.search('plumber Richmond') == []
    tool.session.get.assert_not_called()


def test_search_returns_organic_links():
    tool = SearchTool(Settings(serp_api_key='k'))
    tool.session = MagicMock()
    tool.session.get.return_value = fake_response(payload={'organic_results': [
        {'title': 'A', 'link': 'https://a.com', 'snippet': 'a'},
        {'title': 'No link'},
        {'title': 'B', 'link': 'https://b.com'},
    ]})
    results = tool.search('plumber Richmond', num_results=5)
    assert [r['link'] for r in results] == ['https://a.com', 'https://b.com']
    params = tool.session.get.call_args.kwargs['params']
    assert params['q'] == 'plumber Richmond'
    assert params['location'] == 'Australia'


def test_search_failure_returns_empty():
    tool = SearchTool(Settings(serp_api_key='k'))
    tool.session = MagicMock()
    tool.session.get.return_value = fake_response(status=500)
    assert tool.search('plumber') == []


def test_social_client_disabled_without_key(settings):
    client = SocialDataClient(settings)
    assert client.get_profile('acme') is None
    assert client.get_recent_media('acme') == []


def test_social_client_unwraps_payloads(monkeypatch):
    client = SocialDataClient(Settings(rapidapi_key='k'))
    payloads = {
        '/v1/info': {'data': {'full_name': 'Acme'}},
        '/v1.2/posts': {'data': {'items': [{'like_count': 1}, 'junk', {'like_count': 2}]}},
    }
    monkeypatch.setattr(client, '_get', lambda path, params: payloads[path])
    assert client.get_profile('acme') == {'full_name': 'Acme'}
    assert client.get_recent_media('acme', count=1) == [{'like_count': 1}]


def test_social_client_failures_are_absorbed(monkeypatch):
    client = SocialDataClient(Settings(rapidapi_key='k'))

    def boom(path, params):
        raise requests.Timeout('slow')

    monkeypatch.setattr(client, '_get', boom)
    assert client.get_profile('acme') is None
    assert client.get_recent_media('acme') == []


def test_first_text_block():
    assert first_text_block(AIMessage(content='  hello ')) == 'hello'
    assert first_text_block(AIMessage(content=[
        {'type': 'thinking', 'thinking': '...'},
        {'type': 'text', 'text': 'answer'},
    ])) == 'answer'
    assert first_text_block(AIMessage(content=[])) == ''


def test_text_generator_uses_injected_factory(settings):
    factory = RecordingFactory(FakeChatModel(['done']))
    generator = TextGenerator(settings, llm_factory=factory)
    assert generator.provider == 'custom'
    assert asyncio.run(generator.complete('hi', tier='quality', max_tokens=50)) == 'done'
    assert factory.calls == [('quality', 50)]


def test_text_generator_without_provider(settings):
    generator = TextGenerator(settings)
    assert generator.enabled is False
    with pytest.raises(GenerationError):
        asyncio.run(generator.complete('hi'))


def test_text_generator_rejects_empty_answers(settings):
    generator = TextGenerator(settings, llm_factory=RecordingFactory(FakeChatModel([''])))
    with pytest.raises(GenerationError):
        asyncio.run(generator.complete('hi'))


def test_model_for_tiers():
    settings = Settings()
    assert settings.model_for('openai', 'quality') == 'gpt-4o'
    assert settings.model_for('anthropic', 'fast') == 'claude-haiku-4-5'
    assert settings.model_for('ollama', 'quality') == 'llama3.2'


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv('GOOGLE_API_KEY', 'g')
    monkeypatch.delenv('GEMINI_API_KEY', raising=False)
    monkeypatch.setenv('BRANDSITE_PAGE_TIMEOUT', 'not-a-number')
    monkeypatch.setenv('BRANDSITE_USE_OLLAMA', 'yes')
    settings = Settings.from_env()
    assert settings.google_api_key == 'g'
    assert settings.page_timeout == 10.0
    assert settings.use_ollama is True
