class SummarizationError(Exception):
    """Raised when the language-model summarization attempt fails."""


class SummarizationNetworkError(SummarizationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class SummarizationUpstreamError(SummarizationError):
    """Raised when the AI provider answers with a non-success HTTP status."""
