"""Runtime settings read from the environment (and a local .env file)."""
import os
from typing import Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name, "")
    try:
        return float(value) if value else default
    except ValueError:
        return default


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name, "")
    if not value:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Credentials, timeouts and model choices."""
    model_config = {"frozen": True}

    # Credentials
    anthropic_api_key: str = Field(default="", description="Anthropic key for text generation")
    openai_api_key: str = Field(default="", description="OpenAI key for text generation")
    google_api_key: str = Field(default="", description="Gemini key for text generation")
    serp_api_key: str = Field(default="", description="SerpAPI key for competitor search")
    rapidapi_key: str = Field(default="", description="RapidAPI key for the Instagram scraper")

    # External services
    rapidapi_host: str = Field(default="instagram-scraper-api2.p.rapidapi.com")
    search_region: str = Field(default="Australia", description="Region appended to competitor searches")
    user_agent: str = Field(default="Mozilla/5.0 (compatible; BrandsiteBot/1.0)")

    # Timeouts in seconds
    page_timeout: float = Field(default=10.0)
    social_timeout: float = Field(default=15.0)
    search_timeout: float = Field(default=10.0)
    generation_timeout: float = Field(default=120.0)

    # Models per tier and provider
    anthropic_fast_model: str = Field(default="claude-haiku-4-5")
    anthropic_quality_model: str = Field(default="claude-sonnet-4-5")
    openai_fast_model: str = Field(default="gpt-4o-mini")
    openai_quality_model: str = Field(default="gpt-4o")
    google_fast_model: str = Field(default="gemini-2.5-flash")
    google_quality_model: str = Field(default="gemini-2.5-pro")
    ollama_model: str = Field(default="llama3.2")
    use_ollama: bool = Field(default=False, description="Fall back to a local Ollama model")

    # Output
    output_dir: str = Field(default="generated_sites")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        defaults = cls()
        return cls(
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY", ""),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            google_api_key=os.getenv("GEMINI_API_KEY", "") or os.getenv("GOOGLE_API_KEY", ""),
            serp_api_key=os.getenv("SERP_API_KEY", ""),
            rapidapi_key=os.getenv("RAPIDAPI_KEY", ""),
            rapidapi_host=os.getenv("RAPIDAPI_HOST", defaults.rapidapi_host),
            search_region=os.getenv("BRANDSITE_SEARCH_REGION", defaults.search_region),
            page_timeout=_env_float("BRANDSITE_PAGE_TIMEOUT", defaults.page_timeout),
            social_timeout=_env_float("BRANDSITE_SOCIAL_TIMEOUT", defaults.social_timeout),
            search_timeout=_env_float("BRANDSITE_SEARCH_TIMEOUT", defaults.search_timeout),
            generation_timeout=_env_float("BRANDSITE_GENERATION_TIMEOUT", defaults.generation_timeout),
            anthropic_fast_model=os.getenv("ANTHROPIC_FAST_MODEL", defaults.anthropic_fast_model),
            anthropic_quality_model=os.getenv("ANTHROPIC_QUALITY_MODEL", defaults.anthropic_quality_model),
            openai_fast_model=os.getenv("OPENAI_FAST_MODEL", defaults.openai_fast_model),
            openai_quality_model=os.getenv("OPENAI_QUALITY_MODEL", defaults.openai_quality_model),
            google_fast_model=os.getenv("GEMINI_FAST_MODEL", defaults.google_fast_model),
            google_quality_model=os.getenv("GEMINI_QUALITY_MODEL", defaults.google_quality_model),
            ollama_model=os.getenv("OLLAMA_MODEL", defaults.ollama_model),
            use_ollama=_env_flag("BRANDSITE_USE_OLLAMA", defaults.use_ollama),
            output_dir=os.getenv("BRANDSITE_OUTPUT_DIR", defaults.output_dir),
        )

    def model_for(self, provider: str, tier: str) -> Optional[str]:
        """Model name for a provider at the fast or quality tier."""
        if provider == "ollama":
            return self.ollama_model
        return getattr(self, f"{provider}_{tier}_model", None)


def get_settings() -> Settings:
    return Settings.from_env()
