from __future__ import annotations
from typing import Iterable, List, Optional
from .lemmatizer import Lemmatizer, POS_ORDER

STOP_WORDS = frozenset({
    "a", "able", "about", "across", "after", "all", "almost", "also", "am", "among",
    "an", "and", "any", "are", "as", "at", "be", "because", "been", "but", "by",
    "can", "cannot", "could", "dear", "did", "do", "does", "either", "else", "ever",
    "every", "for", "from", "get", "got", "had", "has", "have", "he", "her", "hers",
    "him", "his", "how", "however", "i", "if", "in", "into", "is", "it", "its",
    "just", "least", "let", "like", "likely", "may", "me", "might", "most", "must",
    "my", "neither", "no", "nor", "not", "of", "off", "often", "on", "only", "or",
    "other", "our", "own", "rather", "said", "say", "says", "she", "should", "since",
    "so", "some", "than", "that", "the", "their", "them", "then", "there", "these",
    "they", "this", "tis", "to", "too", "twas", "us", "wants", "was", "we", "were",
    "what", "when", "where", "which", "while", "who", "whom", "why", "will", "with",
    "would", "yet", "you", "your",
})

# straight and curly quotes, apostrophes, periods and commas
_STRIP_CHARS = ".,\"“”‘’'"
_STRIP_TABLE = str.maketrans("", "", _STRIP_CHARS)


class TextNormalizer:
    def __init__(self, lemmatizer: Lemmatizer, stop_words: Optional[Iterable[str]] = None):
        self.lemmatizer = lemmatizer
        self.stop_words = frozenset(w.lower() for w in stop_words) if stop_words is not None else STOP_WORDS

    def content_words(self, sentence: str) -> List[str]:
        words = sentence.translate(_STRIP_TABLE).lower().split()
        return [w for w in words if w not in self.stop_words]

    def normalize(self, sentence: str) -> List[str]:
        """Sentence -> lemma tokens, stop words removed, order and duplicates kept."""
        phrase = " ".join(self.content_words(sentence))
        for pos in POS_ORDER:
            phrase = self.lemmatizer.lemmatize(pos, phrase)
        return phrase.split()
