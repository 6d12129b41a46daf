from dataclasses import replace
from typing import ClassVar

from simplifier.config.settings import Settings
from simplifier.summarization.base import BaseSummarizer
from simplifier.summarization.example_client_adapter import ExampleClientAdapter
from simplifier.summarization.models import SummarizerConfig
from simplifier.summarization.summarizer import Summarizer


class SummarizerFactory:
    """Creates the configured summarizer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseSummarizer:
        """Create a summarizer from application settings."""
        provider = settings.summarizer_provider.lower()
        config = cls.build_config(settings)
        if provider == "example":
            return Summarizer(
                config=replace(config, model="example"),
                client=ExampleClientAdapter(),
            )
        return Summarizer(config=config)

    @classmethod
    def build_config(cls, settings: Settings) -> SummarizerConfig:
        provider = settings.summarizer_provider.lower()
        return SummarizerConfig(
            api_key=settings.openai_api_key.strip() or None,
            model=settings.openai_model_name,
            base_url=cls._resolve_base_url(provider, settings),
            timeout_seconds=settings.openai_timeout_seconds,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        explicit = (settings.openai_base_url or "").strip() or None
        if provider in ("openai", "example"):
            return explicit
        if provider == "openai_compatible":
            if explicit is None:
                raise ValueError(
                    "openai_base_url is required for summarizer_provider=openai_compatible"
                )
            return explicit
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return explicit or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown summarizer provider '{provider}'. Choose from: {supported}"
        )
