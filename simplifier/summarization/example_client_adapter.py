"""Offline summary client for local development.

Use this module as a reference when implementing new provider adapters.
Implement BaseSummaryClient and register the provider in SummarizerFactory.
"""

from typing import ClassVar

from simplifier.summarization.client_base import BaseSummaryClient


class ExampleClientAdapter(BaseSummaryClient):
    """Returns a fixed reply in the shape a chat model usually answers with.

    No network calls.
    """

    DEFAULT_REPLY: ClassVar[str] = "\n".join(
        [
            "This is an offline example summary.",
            "No language model was contacted.",
            "",
            "- Configure OPENAI_API_KEY for real summaries",
            "- The document text was received",
            "- Key points are parsed from bullet lines",
            "- Original extract is returned unchanged",
        ]
    )

    def __init__(self, reply: str | None = None) -> None:
        self._reply = reply if reply is not None else self.DEFAULT_REPLY

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, user_prompt
        return self._reply
