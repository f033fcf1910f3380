"""External collaborators: article retrieval and keyword analysis."""

from content_robot.services.base import ArticleRetriever, KeywordAnalyzer, StateStore
from content_robot.services.watson import WatsonKeywordAnalyzer
from content_robot.services.wikipedia import WikipediaRetriever

__all__ = [
    "ArticleRetriever",
    "KeywordAnalyzer",
    "StateStore",
    "WatsonKeywordAnalyzer",
    "WikipediaRetriever",
]
