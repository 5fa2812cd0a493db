"""Product category classifier using database-driven keyword scoring.

Given a free-text product name, every active category is scored from
its own name, the words of its name and the keywords registered for it.
The highest-scoring category wins; a product with no matches is left
uncategorized.

Scoring (per matched keyword, first rule wins):
    category name itself            +20
    word of the category name       +15
    high-priority, whole word       +10
    high-priority, substring only    +5
    whole word                       +5
    substring only                   +1

Bonuses per category:
    more than one keyword matched   +2 per matched keyword
    matched keyword longer than 5   +2 each

Example:
    classifier = CategoryClassifier(DatabaseKeywordStore())
    category_id = await classifier.classify("iPhone 15 Pro Max เคสใส")
"""
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

import structlog

from catalog.schemas.category import CategoryRecord, KeywordRecord, KeywordSnapshot
from catalog.services.classification.keyword_store import KeywordStore, load_snapshot
from catalog.utils.errors import ValidationError

logger = structlog.get_logger(__name__)

NAME_SCORE = 20
NAME_WORD_SCORE = 15
HIGH_PRIORITY_WORD_SCORE = 10
HIGH_PRIORITY_SUBSTRING_SCORE = 5
WORD_SCORE = 5
SUBSTRING_SCORE = 1
MULTI_MATCH_BONUS = 2
LONG_KEYWORD_BONUS = 2
LONG_KEYWORD_MIN_LENGTH = 6

_NAME_SPLIT = re.compile(r"[\s\-_]+")

# \w plus combining marks (Latin diacritics, Thai vowel and tone marks);
# a mark belongs to the word it sits on.
_WORD_CHAR = (
    r"[\w\u0300-\u036f\u1ab0-\u1aff\u1dc0-\u1dff\u20d0-\u20ff\ufe20-\ufe2f"
    r"\u0e31\u0e34-\u0e3a\u0e47-\u0e4e]"
)


@dataclass
class CategoryScore:
    """Scoring detail for one category."""
    category_id: int
    category_name: str
    score: int = 0
    matched_keywords: List[str] = field(default_factory=list)

    @property
    def is_match(self) -> bool:
        return self.score > 0


def category_name_words(name_lower: str) -> List[str]:
    """Split a lowercased category name on whitespace, hyphen and underscore."""
    return [w for w in _NAME_SPLIT.split(name_lower) if len(w) > 1]


def is_whole_word(keyword_lower: str, text_lower: str) -> bool:
    """True if keyword occurs in text not touching other word characters.

    The keyword is escaped, so "c++" or "a.b" match only literally. A
    Thai keyword next to a tone mark or vowel sign is inside a word.
    """
    pattern = f"(?<!{_WORD_CHAR}){re.escape(keyword_lower)}(?!{_WORD_CHAR})"
    return re.search(pattern, text_lower) is not None


def _is_high_priority(keyword_lower: str, high_priority: Sequence[str]) -> bool:
    return any(
        keyword_lower == hp or hp in keyword_lower or keyword_lower in hp
        for hp in high_priority
    )


def score_category(
    category: CategoryRecord,
    keywords: Iterable[KeywordRecord],
    name_lower: str,
) -> CategoryScore:
    """Score one category against an already lowercased product name."""
    keywords = list(keywords)
    cat_name = category.name.lower()
    name_words = category_name_words(cat_name)

    candidates: List[str] = []
    seen = set()
    high_priority: List[str] = []
    for kw in [cat_name, *name_words, *(row.keyword.lower() for row in keywords)]:
        if kw and kw not in seen:
            seen.add(kw)
            candidates.append(kw)
    for row in keywords:
        if row.is_high_priority:
            high_priority.append(row.keyword.lower())

    result = CategoryScore(category_id=category.id, category_name=category.name)

    for kw in candidates:
        exact_word = is_whole_word(kw, name_lower)
        substring = kw in name_lower
        if not (exact_word or substring):
            continue

        hp = _is_high_priority(kw, high_priority)

        if kw == cat_name:
            result.score += NAME_SCORE
        elif kw in name_words:
            result.score += NAME_WORD_SCORE
        elif hp and exact_word:
            result.score += HIGH_PRIORITY_WORD_SCORE
        elif hp:
            result.score += HIGH_PRIORITY_SUBSTRING_SCORE
        elif exact_word:
            result.score += WORD_SCORE
        else:
            result.score += SUBSTRING_SCORE
        result.matched_keywords.append(kw)

    matched = len(result.matched_keywords)
    if matched > 1:
        result.score += matched * MULTI_MATCH_BONUS
    result.score += LONG_KEYWORD_BONUS * sum(
        1 for kw in result.matched_keywords if len(kw) >= LONG_KEYWORD_MIN_LENGTH
    )
    return result


def score_snapshot(snapshot: KeywordSnapshot, product_name: str) -> List[CategoryScore]:
    """Score every category of a snapshot, in ascending category id order."""
    name_lower = product_name.lower()
    grouped = snapshot.keywords_by_category()
    return [
        score_category(category, grouped[category.id], name_lower)
        for category in sorted(snapshot.categories, key=lambda c: c.id)
    ]


def classify_snapshot(snapshot: KeywordSnapshot, product_name: str) -> Optional[int]:
    """Pick the best category of a snapshot, or None when nothing scores.

    Ties keep the first category scored, i.e. the lowest id.
    """
    best: Optional[CategoryScore] = None
    for scored in score_snapshot(snapshot, product_name):
        if best is None or scored.score > best.score:
            best = scored
    if best is None or best.score <= 0:
        return None
    return best.category_id


def _require_name(product_name: object) -> str:
    if not isinstance(product_name, str):
        raise ValidationError(
            "product_name must be a string",
            details={"type": type(product_name).__name__},
        )
    if not product_name.strip():
        raise ValidationError("product_name must not be empty")
    return product_name


class CategoryClassifier:
    """Keyword-scoring category classifier.

    Holds no state besides its store; every call reads a fresh snapshot
    (or whatever the store serves), so instances are safe to share
    between concurrent tasks.

    Attributes:
        store: Source of active categories and keywords
    """

    def __init__(self, store: KeywordStore):
        self.store = store
        self._log = logger.bind(component="CategoryClassifier")

    async def load_snapshot(self) -> KeywordSnapshot:
        """Read the keyword universe, or an empty one if the store fails."""
        try:
            snapshot = await load_snapshot(self.store)
        except Exception as e:
            self._log.error("keyword_store_unavailable", error=str(e))
            return KeywordSnapshot.empty()

        if snapshot.is_empty:
            self._log.warning("no_active_categories")
        elif not snapshot.keywords:
            self._log.warning("no_keywords_registered", categories=len(snapshot.categories))
        return snapshot

    async def classify(self, product_name: str) -> Optional[int]:
        """Classify a product name.

        Args:
            product_name: Listing title to classify

        Returns:
            ID of the best-matching active category, or None

        Raises:
            ValidationError: If product_name is not a non-blank string
        """
        product_name = _require_name(product_name)
        snapshot = await self.load_snapshot()
        return self.classify_with(snapshot, product_name)

    def classify_with(self, snapshot: KeywordSnapshot, product_name: str) -> Optional[int]:
        """Classify against an already loaded snapshot."""
        product_name = _require_name(product_name)
        category_id = classify_snapshot(snapshot, product_name)

        if category_id is None:
            self._log.info("no_category_match", product=product_name[:50])
        else:
            self._log.debug(
                "classified_by_keyword",
                product=product_name[:50],
                category_id=category_id,
            )
        return category_id

    async def rank(self, product_name: str) -> List[CategoryScore]:
        """Every matching category, best first (ties by lowest id)."""
        product_name = _require_name(product_name)
        snapshot = await self.load_snapshot()
        scores = [s for s in score_snapshot(snapshot, product_name) if s.is_match]
        scores.sort(key=lambda s: (-s.score, s.category_id))
        return scores

    async def classify_many(self, product_names: Iterable[str]) -> dict[str, Optional[int]]:
        """Classify a batch of names against a single snapshot."""
        names = [_require_name(name) for name in product_names]
        snapshot = await self.load_snapshot()
        return {name: self.classify_with(snapshot, name) for name in names}
