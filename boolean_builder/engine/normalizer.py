"""Term normalization: CSV splitting, lookup keys, quoting, ordered term sets."""

from collections.abc import Iterable, Iterator

MAX_TERMS = 20


def normalize_csv(raw: str | None) -> list[str]:
    """Split comma-separated text into trimmed, non-empty terms.

    Keeps at most MAX_TERMS terms. Case is preserved for display.
    """
    if not raw:
        return []
    terms = [piece.strip() for piece in raw.split(",")]
    return [t for t in terms if t][:MAX_TERMS]


def canonical_key(term: str) -> str:
    """Lowercased, trimmed form used only for lexicon lookup."""
    return term.strip().lower()


def quote_term(term: str) -> str:
    """Wrap a multi-word term in double quotes unless it already carries quotes.

    Single bare words are returned unchanged.
    """
    if '"' in term or not any(ch.isspace() for ch in term):
        return term
    return f'"{term}"'


class TermSet:
    """Ordered sequence of terms with set semantics (first-seen order wins)."""

    def __init__(self, terms: Iterable[str] = ()) -> None:
        self._terms: list[str] = []
        self._seen: set[str] = set()
        self.extend(terms)

    def add(self, term: str) -> None:
        if term and term not in self._seen:
            self._seen.add(term)
            self._terms.append(term)

    def extend(self, terms: Iterable[str]) -> None:
        for term in terms:
            self.add(term)

    @property
    def terms(self) -> list[str]:
        return list(self._terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._seen

    def __repr__(self) -> str:
        return f"TermSet({self._terms!r})"
