"""Article lookup with short summaries."""

from __future__ import annotations

from .repository import ArticleRepository, NotFoundError, SimpleSummaryArticle


class ArticleService:
    """Serves articles from a repository, summarised to a word limit."""

    def __init__(self, articles: ArticleRepository, summary_word_limit: int) -> None:
        self.articles = articles
        self.summary_word_limit = summary_word_limit

    def by_id(self, article_id: int) -> SimpleSummaryArticle:
        """Return the article with the given id as a summary record."""
        try:
            article = self.articles.by_id(article_id)
        except NotFoundError as exc:
            raise NotFoundError(
                f"error while retrieving a single article by id: {exc}"
            ) from exc
        return SimpleSummaryArticle(
            id=article.id,
            title=article.title,
            summary=article.content,
            more=article.content,
        )

    def summarize(self, content: str) -> str:
        """Cut content down to the word limit, marking the cut with '...'."""
        words = content.replace("\n", " ").split(" ")
        if len(words) > self.summary_word_limit:
            return " ".join(words[: self.summary_word_limit]) + "..."
        return " ".join(words)