"""Article ordering and previous/next navigation for the blog build."""

from .articles import Article, ArticleError, articles, load_articles, sorted_articles
from .sequencer import ArticleSequence, next_article, previous_article

__all__ = [
    "Article",
    "ArticleError",
    "ArticleSequence",
    "articles",
    "load_articles",
    "next_article",
    "previous_article",
    "sorted_articles",
]
