"""In-process stand-ins for network, social data and chat model collaborators."""
from typing import Dict, List, Optional

from langchain_core.messages import AIMessage

from brandsite.app.config import Settings


PLUMBER_SITE = """<!DOCTYPE html>
<html>
<head>
  <title>Richmond Pipes | Local Plumbers</title>
  <meta name="description" content="Friendly local plumbers serving Richmond families. Same day service.">
  <link href="https://fonts.googleapis.com/css2?family=Roboto+Slab:wght@700&amp;family=Lato&display=swap" rel="stylesheet">
  <style>
    body { font-family: "Lato", sans-serif; color: #222222; background: #fdfdfd; }
    .brand { color: #0a66c2; }
    .btn-primary { background: rgb(255, 122, 0); }
    nav.fixed-top { position: fixed; }
  </style>
</head>
<body>
  <nav class="fixed-top"><img class="site-logo" src="/img/logo.png" alt="Richmond Pipes logo"></nav>
  <section class="hero split">
    <h1>Plumbing done right</h1>
    <img class="hero-image" src="//cdn.example.com/hero.jpg">
    <a class="btn btn-primary" href="#contact">Book a plumber</a>
  </section>
  <section>
    <h3>Blocked Drains</h3>
    <h3>Hot Water Systems</h3>
    <strong>Gas Fitting</strong>
    <img src="data:image/png;base64,AAAA">
    <img src="gallery/job1.jpg">
  </section>
  <section><p>Licensed and insured with 20 years experience. Trusted by local families.</p></section>
</body>
</html>
"""


class FakeFetcher:
    """Returns canned HTML by URL; unknown URLs behave like unreachable pages."""

    def __init__(self, pages: Dict[str, str] = None):
        self.pages = pages or {}
        self.requested = []

    def fetch(self, url: str) -> Optional[str]:
        self.requested.append(url)
        return self.pages.get(url)


class FakeSearchTool:
    def __init__(self, links: List[str] = None, enabled: bool = True):
        self.links = links or []
        self.enabled = enabled
        self.settings = Settings()
        self.queries = []

    def search(self, query: str, num_results: int = 5):
        self.queries.append(query)
        return [{'title': '', 'link': link, 'snippet': ''} for link in self.links]


class FakeSocialClient:
    def __init__(self, profile: dict = None, media: List[dict] = None, enabled: bool = True):
        self.profile = profile
        self.media = media or []
        self.enabled = enabled

    def get_profile(self, handle: str):
        return self.profile

    def get_recent_media(self, handle: str, count: int = 12):
        return self.media[:count]


class FakeChatModel:
    """Stands in for a LangChain chat model and records every prompt."""

    def __init__(self, responses: List[object]):
        self.responses = list(responses)
        self.prompts = []

    async def ainvoke(self, messages):
        self.prompts.append(messages[0].content)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return AIMessage(content=response)


class RecordingFactory:
    """llm_factory for TextGenerator that hands out one shared fake model."""

    def __init__(self, model: FakeChatModel):
        self.model = model
        self.calls = []

    def __call__(self, tier: str, max_tokens: int):
        self.calls.append((tier, max_tokens))
        return self.model


class MemoryStore:
    def __init__(self, ok: bool = True):
        self.ok = ok
        self.saved = {}

    def save(self, slug, artifact) -> bool:
        if self.ok:
            self.saved[slug] = artifact
        return self.ok


def social_post(url: str, caption: str, likes: int) -> dict:
    return {
        'image_versions': {'items': [{'url': url}]},
        'caption': {'text': caption},
        'like_count': likes,
    }


