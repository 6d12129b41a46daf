"""Two-tier document summarizer: language model first, heuristic fallback."""

from simplifier.logging.logger import Log
from simplifier.summarization.base import BaseSummarizer
from simplifier.summarization.client_base import BaseSummaryClient
from simplifier.summarization.heuristic import heuristic_summary
from simplifier.summarization.models import (
    ORIGINAL_EXTRACT_LIMIT,
    PrimaryOutcome,
    SummarizerConfig,
    SummaryResult,
)
from simplifier.summarization.openai_client_adapter import OpenAIClientAdapter
from simplifier.summarization.prompt_loader import load_prompt_template
from simplifier.summarization.reply_parser import parse_reply


class Summarizer(BaseSummarizer):
    """Summarizes extracted text, degrading to the heuristic on any failure.

    Without an explicit client, one is built from the config credential; no
    credential means the language model is never contacted.
    """

    def __init__(
        self,
        config: SummarizerConfig,
        client: BaseSummaryClient | None = None,
    ) -> None:
        self._config = config
        if client is None and config.has_credential:
            client = OpenAIClientAdapter(
                api_key=config.api_key or "",
                timeout_seconds=config.timeout_seconds,
                base_url=config.base_url,
            )
        self._client = client
        self._prompt_template = load_prompt_template(config.prompt_template_path)

    @property
    def uses_language_model(self) -> bool:
        return self._client is not None

    def summarize(self, text: str) -> SummaryResult:
        outcome = self._try_language_model(text)
        if outcome.ok and outcome.result is not None:
            Log.info("Summarized with language model", model=self._config.model)
            return outcome.result
        if not outcome.skipped:
            Log.warning(f"Language-model summarization failed: {outcome.error}")
        Log.info("Summarized with heuristic fallback")
        return heuristic_summary(text)

    def _try_language_model(self, text: str) -> PrimaryOutcome:
        if self._client is None:
            return PrimaryOutcome()
        try:
            reply = self._client.create_chat_completion(
                model=self._config.model,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
                user_prompt=self._build_prompt(text),
            )
            Log.debug(f"AI raw reply:\n{reply}")
            parsed = parse_reply(reply)
        except Exception as exc:
            return PrimaryOutcome.failed(str(exc) or type(exc).__name__)
        return PrimaryOutcome.succeeded(
            SummaryResult(
                summary=parsed.summary,
                key_points=parsed.key_points,
                original_extract=text[:ORIGINAL_EXTRACT_LIMIT],
            )
        )

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(text=text)
