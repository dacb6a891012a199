from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Tuple, TYPE_CHECKING
from .lemmatizer import Lemmatizer, WordNetLemmatizer
from .normalizer import TextNormalizer
from .ranking import count_frequencies, extract_keywords, rank_and_select
from .segmenter import segment

if TYPE_CHECKING:
    from .config import SummaryConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sentence:
    index: int
    raw_text: str
    normalized_tokens: Tuple[str, ...]


class SummaryResult(NamedTuple):
    selected_sentences: List[str]
    keywords: List[str]


class Summarizer:
    """
    Extractive summary + keyword pipeline:
    - Segment text into sentences
    - Normalize each sentence into lemmas
    - Weight sentences by lemma frequency and part of speech
    - Return top-N sentences in document order and the noun-only keywords

    All per-call state is built fresh inside `summarize`; the only shared
    state is the read-only lemmatizer and stop-word set, so one instance can
    serve concurrent callers without locking.
    """

    def __init__(self, lemmatizer: Lemmatizer, stop_words: Optional[Iterable[str]] = None):
        self.lemmatizer = lemmatizer
        self.normalizer = TextNormalizer(lemmatizer, stop_words)

    @classmethod
    def from_config(cls, cfg: "SummaryConfig") -> "Summarizer":
        # LemmatizerLoadError propagates: no pipeline without a dictionary
        return cls(WordNetLemmatizer(cfg.wordnet_path))

    def analyze(self, text: str) -> List[Sentence]:
        return [
            Sentence(index=i, raw_text=raw, normalized_tokens=tuple(self.normalizer.normalize(raw)))
            for i, raw in enumerate(segment(text))
        ]

    def summarize(self, text: str, max_sentences: int) -> SummaryResult:
        sentences = self.analyze(text)
        table = count_frequencies(s.normalized_tokens for s in sentences)
        selected = rank_and_select(sentences, table, self.lemmatizer, max_sentences)
        keywords = extract_keywords(table, self.lemmatizer)
        logger.debug("summary: %d sentences, %d lemmas, %d keywords", len(sentences), len(table), len(keywords))
        return SummaryResult(selected_sentences=selected, keywords=keywords)
