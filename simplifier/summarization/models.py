from dataclasses import dataclass, field
from pathlib import Path

ORIGINAL_EXTRACT_LIMIT = 1500
MAX_KEY_POINTS = 4


@dataclass(frozen=True)
class SummaryResult:
    """Plain-language summary returned to the client."""

    summary: str
    key_points: list[str] = field(default_factory=list)
    original_extract: str = ""


@dataclass(frozen=True)
class ParsedReply:
    """Summary and key points recovered from a language-model reply."""

    summary: str
    key_points: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PrimaryOutcome:
    """Result of the language-model attempt.

    Exactly one of three states: succeeded (result set), failed (error set),
    or skipped (neither set, no client configured).
    """

    result: SummaryResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None

    @property
    def skipped(self) -> bool:
        return self.result is None and self.error is None

    @classmethod
    def succeeded(cls, result: SummaryResult) -> "PrimaryOutcome":
        return cls(result=result)

    @classmethod
    def failed(cls, error: str) -> "PrimaryOutcome":
        return cls(error=error)


@dataclass(frozen=True)
class SummarizerConfig:
    """Explicit summarizer configuration; no credential means heuristic only."""

    api_key: str | None = None
    model: str = "gpt-4o-mini"
    base_url: str | None = None
    timeout_seconds: float | None = None
    max_tokens: int = 500
    temperature: float = 0.2
    prompt_template_path: Path | None = None

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)
