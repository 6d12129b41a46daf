import httpx
import openai

from simplifier.summarization.client_base import BaseSummaryClient
from simplifier.summarization.exceptions import (
    SummarizationError,
    SummarizationNetworkError,
    SummarizationUpstreamError,
)


class OpenAIClientAdapter(BaseSummaryClient):
    """Summary client built on the OpenAI-compatible chat completions API.

    SDK retries are disabled: a failed call is reported once and the caller
    decides what to do.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float | None = None,
        base_url: str | None = None,
    ) -> None:
        options: dict[str, object] = {}
        if timeout_seconds is not None:
            options["timeout"] = timeout_seconds
        self._client = openai.OpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=0,
            **options,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except openai.APIStatusError as exc:
            raise SummarizationUpstreamError(
                f"AI provider error ({exc.status_code}): {exc.response.text}"
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SummarizationNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise SummarizationError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
