"""External collaborators: page fetching, competitor search, social data and text generation."""
from typing import Any, Callable, Dict, List, Optional
import requests
from langchain_core.messages import HumanMessage

from brandsite.app.config import Settings, get_settings
from brandsite.app.logger import logger

# Text generation providers are optional installs
try:
    from langchain_anthropic import ChatAnthropic
    ANTHROPIC_AVAILABLE = True
except ImportError:
    ANTHROPIC_AVAILABLE = False

try:
    from langchain_openai import ChatOpenAI
    OPENAI_AVAILABLE = True
except ImportError:
    OPENAI_AVAILABLE = False

try:
    from langchain_google_genai import ChatGoogleGenerativeAI
    GOOGLE_AVAILABLE = True
except ImportError:
    GOOGLE_AVAILABLE = False

try:
    from langchain_ollama import ChatOllama
    OLLAMA_AVAILABLE = True
except ImportError:
    OLLAMA_AVAILABLE = False


class GenerationError(RuntimeError):
    """Raised when the final site generation stage produces nothing usable."""


class PageFetcher:
    """Fetch a single HTML page with a bounded timeout."""

    def __init__(self, settings: Settings = None):
        self.settings = settings or get_settings()
        self.timeout = self.settings.page_timeout
        self.session = requests.Session()
        self.session.headers.update({'User-Agent': self.settings.user_agent})

    def fetch(self, url: str) -> Optional[str]:
        """Return the page body, or None when it is unreachable or not HTML."""
        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            logger.warning(f"⚠ Could not fetch {url}: {e}")
            return None

        if not response.ok:
            logger.warning(f"⚠ {url} answered HTTP {response.status_code}")
            return None

        content_type = (response.headers.get('Content-Type') or '').lower()
        if content_type and 'html' not in content_type and 'xml' not in content_type:
            logger.warning(f"⚠ {url} is not an HTML page ({content_type})")
            return None

        return response.text


class SearchTool:
    """Organic web search through SerpAPI."""

    ENDPOINT = "https://serpapi.com/search.json"

    def __init__(self, settings: Settings = None):
        self.settings = settings or get_settings()
        self.api_key = self.settings.serp_api_key
        self.session = requests.Session()

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def search(self, query: str, num_results: int = 5) -> List[Dict[str, str]]:
        """Return title, link and snippet for the top organic results."""
        if not self.enabled:
            logger.info("No SERP_API_KEY configured, skipping web search")
            return []

        params = {
            'engine': 'google',
            'q': query,
            'num': num_results,
            'api_key': self.api_key,
        }
        if self.settings.search_region:
            params['location'] = self.settings.search_region

        try:
            response = self.session.get(self.ENDPOINT, params=params, timeout=self.settings.search_timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"⚠ Search failed for '{query}': {e}")
            return []

        results = []
        for item in payload.get('organic_results') or []:
            link = item.get('link')
            if not link:
                continue
            results.append({
                'title': item.get('title', ''),
                'link': link,
                'snippet': item.get('snippet', ''),
            })
        return results[:num_results]


class SocialDataClient:
    """Instagram profile and post lookups through the RapidAPI scraper."""

    def __init__(self, settings: Settings = None):
        self.settings = settings or get_settings()
        self.api_key = self.settings.rapidapi_key
        self.host = self.settings.rapidapi_host
        self.session = requests.Session()

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def _get(self, path: str, params: Dict[str, Any]) -> Any:
        response = self.session.get(
            f"https://{self.host}{path}",
            params=params,
            headers={'X-RapidAPI-Key': self.api_key, 'X-RapidAPI-Host': self.host},
            timeout=self.settings.social_timeout,
        )
        response.raise_for_status()
        return response.json()

    def get_profile(self, handle: str) -> Optional[Dict[str, Any]]:
        """Raw profile record, or None when the lookup fails."""
        if not self.enabled:
            return None
        try:
            payload = self._get('/v1/info', {'username_or_id_or_url': handle})
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"⚠ Profile lookup failed for @{handle}: {e}")
            return None
        data = payload.get('data') if isinstance(payload, dict) else None
        return data or None

    def get_recent_media(self, handle: str, count: int = 12) -> List[Dict[str, Any]]:
        """Raw recent post records, empty when the lookup fails."""
        if not self.enabled:
            return []
        try:
            payload = self._get('/v1.2/posts', {'username_or_id_or_url': handle, 'count': count})
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"⚠ Post lookup failed for @{handle}: {e}")
            return []
        data = payload.get('data') if isinstance(payload, dict) else None
        items = (data or {}).get('items') or []
        return [item for item in items if isinstance(item, dict)][:count]


def first_text_block(response: Any) -> str:
    """Text of the first text block in a chat model response."""
    content = getattr(response, 'content', response)
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, list):
        for block in content:
            if isinstance(block, str) and block.strip():
                return block.strip()
            if isinstance(block, dict) and block.get('type') == 'text' and block.get('text'):
                return block['text'].strip()
    return ""


class TextGenerator:
    """Chat model access with a fast and a quality tier."""

    def __init__(self, settings: Settings = None, llm_factory: Callable[[str, int], Any] = None):
        self.settings = settings or get_settings()
        if llm_factory is not None:
            self.provider = "custom"
            self._llm_factory = llm_factory
        else:
            self.provider = self._select_provider()
            self._llm_factory = self._initialize_llm

    @property
    def enabled(self) -> bool:
        return self.provider is not None

    def _select_provider(self) -> Optional[str]:
        """First provider that is both installed and configured."""
        if ANTHROPIC_AVAILABLE and self.settings.anthropic_api_key:
            provider = "anthropic"
        elif OPENAI_AVAILABLE and self.settings.openai_api_key:
            provider = "openai"
        elif GOOGLE_AVAILABLE and self.settings.google_api_key:
            provider = "google"
        elif OLLAMA_AVAILABLE and self.settings.use_ollama:
            provider = "ollama"
        else:
            logger.warning("⚠ No text generation provider available")
            logger.warning("  Set ANTHROPIC_API_KEY, OPENAI_API_KEY or GEMINI_API_KEY, or BRANDSITE_USE_OLLAMA=1")
            return None
        logger.info(f"✓ Text generation via {provider}")
        return provider

    def _initialize_llm(self, tier: str, max_tokens: int):
        """Build a chat model for one call at the requested tier."""
        settings = self.settings
        model = settings.model_for(self.provider, tier) if self.provider else None

        if self.provider == "anthropic":
            return ChatAnthropic(
                model=model,
                max_tokens=max_tokens,
                api_key=settings.anthropic_api_key,
                timeout=settings.generation_timeout,
                max_retries=0,
            )
        if self.provider == "openai":
            return ChatOpenAI(
                model=model,
                max_tokens=max_tokens,
                api_key=settings.openai_api_key,
                timeout=settings.generation_timeout,
                max_retries=0,
            )
        if self.provider == "google":
            return ChatGoogleGenerativeAI(
                model=model,
                max_output_tokens=max_tokens,
                google_api_key=settings.google_api_key,
                timeout=settings.generation_timeout,
                max_retries=0,
            )
        if self.provider == "ollama":
            return ChatOllama(model=model, num_predict=max_tokens)
        return None

    async def complete(self, prompt: str, tier: str = "fast", max_tokens: int = 1000) -> str:
        """Send one prompt and return the first text block of the answer."""
        llm = self._llm_factory(tier, max_tokens)
        if llm is None:
            raise GenerationError("No text generation provider configured")

        logger.debug(f"Calling {self.provider} ({tier}, max_tokens={max_tokens}), prompt {len(prompt)} chars")
        response = await llm.ainvoke([HumanMessage(content=prompt)])
        text = first_text_block(response)
        if not text:
            raise GenerationError("Model response contained no text block")
        return text
