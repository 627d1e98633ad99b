"""Application search – DisplayViewModel (result cards)."""
from __future__ import annotations

from dataclasses import dataclass, field

from facetlens.application.search.config import DisplayConfig
from facetlens.application.search.resolver import FieldResolver, plain_string
from facetlens.kernel.types import Document

__all__ = ["CardField", "DisplayViewModel", "ResultCard"]

_RESERVED_KEYS = frozenset({"id", "title", "name", "description", "_rankingScore"})
_FALLBACK_FIELD_COUNT = 3
UNTITLED = "Untitled"


@dataclass(frozen=True)
class CardField:
    id: str
    label: str
    value: str


@dataclass(frozen=True)
class ResultCard:
    """Display-ready text for one hit."""
    title: str
    subtitle: str = ""
    image_url: str = ""
    fields: tuple[CardField, ...] = field(default_factory=tuple)
    score: float | None = None

    @property
    def score_label(self) -> str:
        return "" if self.score is None else f"{self.score:.3f}"


def _ranking_score(document: Document) -> float | None:
    score = document.get("_rankingScore")
    if isinstance(score, (int, float)) and not isinstance(score, bool):
        return float(score)
    return None


class DisplayViewModel:
    """Builds :class:`ResultCard` objects from hits.

    With a :class:`DisplayConfig` every line comes from a configured field
    path.  Without one, the card falls back to ``title``/``name`` and the
    first few remaining keys.
    """

    def __init__(self, config: DisplayConfig | None = None, resolver: FieldResolver | None = None) -> None:
        self._config = config
        self._resolver = resolver or FieldResolver()

    def card(self, document: Document) -> ResultCard:
        if self._config is None:
            return self._fallback_card(document)

        config = self._config
        resolve = self._resolver.resolve
        fields = []
        for extra in config.additional_fields:
            value = resolve(document, extra.field_name)
            if value:
                fields.append(CardField(id=extra.id, label=extra.display_label, value=value))

        return ResultCard(
            title=resolve(document, config.primary_text) or UNTITLED,
            subtitle=resolve(document, config.secondary_text) if config.secondary_text else "",
            image_url=resolve(document, config.image_url, is_image_field=True) if config.image_url else "",
            fields=tuple(fields),
            score=_ranking_score(document),
        )

    def cards(self, documents: list[Document]) -> list[ResultCard]:
        return [self.card(document) for document in documents]

    def _fallback_card(self, document: Document) -> ResultCard:
        title = document.get("title") or document.get("name")
        if title:
            title_text = plain_string(title)
        elif document.get("id") is not None:
            title_text = f"Item {plain_string(document['id'])}"
        else:
            title_text = UNTITLED

        description = document.get("description")
        extras = [key for key in document if key not in _RESERVED_KEYS][:_FALLBACK_FIELD_COUNT]
        return ResultCard(
            title=title_text,
            subtitle=description if isinstance(description, str) else "",
            fields=tuple(CardField(id=key, label=key, value=plain_string(document[key])) for key in extras),
            score=_ranking_score(document),
        )
