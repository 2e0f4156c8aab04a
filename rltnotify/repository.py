"""Article records and the repository interface that supplies them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any


class NotFoundError(LookupError):
    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Article:
    id: int
    title: str
    content: str


class ArticleRepository(ABC):
    @abstractmethod
    def by_id(self, article_id: int) -> Article:
        """Return the article with the given id or raise NotFoundError."""


@dataclass(frozen=True)
class SimpleSummaryArticle:
    id: int
    title: str
    summary: str
    more: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)