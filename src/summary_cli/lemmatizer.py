from __future__ import annotations
import logging
import threading
from functools import lru_cache
from typing import NamedTuple, Optional, Protocol

import nltk
from nltk.corpus import wordnet
from nltk.corpus.reader.wordnet import NOUN, VERB, ADJ, ADV
from nltk.stem import WordNetLemmatizer as _NltkLemmatizer

logger = logging.getLogger(__name__)

# nouns first: the ranking favours nouns, so noun lemmas should win
POS_ORDER = (NOUN, VERB, ADJ, ADV)


class LemmatizerLoadError(RuntimeError):
    """The lemma dictionary could not be loaded."""


class WordClass(NamedTuple):
    is_noun: bool
    is_verb: bool
    is_adjective: bool
    is_adverb: bool


class Lemmatizer(Protocol):
    def lemmatize(self, pos: str, phrase: str) -> str: ...

    def classify(self, word: str) -> WordClass: ...


class WordNetLemmatizer:
    """
    Lemmatizer backed by the NLTK WordNet corpus.

    The corpus is loaded eagerly so a missing dictionary fails at
    construction instead of on the first request. After that the instance
    is read-only and may be shared between threads.
    """

    def __init__(self, wordnet_path: Optional[str] = None):
        if wordnet_path and wordnet_path not in nltk.data.path:
            nltk.data.path.insert(0, wordnet_path)
        try:
            wordnet.ensure_loaded()
        except LookupError as ex:
            raise LemmatizerLoadError(
                f"WordNet corpus not found (searched {nltk.data.path})"
            ) from ex
        self._lemmatizer = _NltkLemmatizer()
        self._lock = threading.Lock()
        self._cached_classify = lru_cache(maxsize=65536)(self._lookup)
        logger.debug("WordNet %s loaded", wordnet.get_version())

    def lemmatize(self, pos: str, phrase: str) -> str:
        return " ".join(self._lemmatizer.lemmatize(w, pos) for w in phrase.split())

    def classify(self, word: str) -> WordClass:
        return self._cached_classify(word)

    def _lookup(self, word: str) -> WordClass:
        # synset reads share one corpus file handle
        with self._lock:
            return WordClass(
                is_noun=bool(wordnet.synsets(word, pos=NOUN)),
                is_verb=bool(wordnet.synsets(word, pos=VERB)),
                is_adjective=bool(wordnet.synsets(word, pos=ADJ)),
                is_adverb=bool(wordnet.synsets(word, pos=ADV)),
            )
