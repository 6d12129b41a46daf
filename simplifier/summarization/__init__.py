from simplifier.summarization.base import BaseSummarizer
from simplifier.summarization.factory import SummarizerFactory
from simplifier.summarization.summarizer import Summarizer

__all__ = ["BaseSummarizer", "Summarizer", "SummarizerFactory"]
