from typing import Dict, Tuple
import pytest
from summary_cli.lemmatizer import NOUN, VERB, ADJ, ADV, WordClass
from summary_cli.summarizer import Summarizer

# word -> base form, per part of speech
LEMMAS: Dict[str, Dict[str, str]] = {
    NOUN: {"cats": "cat", "dogs": "dog", "fish": "fish", "parks": "park", "birds": "bird"},
    VERB: {"sat": "sit", "barked": "bark", "running": "run", "ran": "run", "eats": "eat", "sleeps": "sleep"},
    ADJ: {"happier": "happy"},
    ADV: {},
}

# word -> (noun, verb, adj, adv)
CLASSES: Dict[str, Tuple[bool, bool, bool, bool]] = {
    "cat": (True, False, False, False),
    "dog": (True, True, False, False),
    "fish": (True, True, False, False),
    "park": (True, True, False, False),
    "bird": (True, False, False, False),
    "tree": (True, False, False, False),
    "sit": (False, True, False, False),
    "bark": (True, True, False, False),
    "run": (True, True, False, False),
    "eat": (False, True, False, False),
    "sleep": (True, True, False, False),
    "happy": (False, False, True, False),
    "loudly": (False, False, False, True),
    "fast": (False, True, True, True),
}


class FakeLemmatizer:
    def __init__(self):
        self.calls = []

    def lemmatize(self, pos, phrase):
        self.calls.append((pos, phrase))
        return " ".join(LEMMAS[pos].get(w, w) for w in phrase.split())

    def classify(self, word):
        return WordClass(*CLASSES.get(word, (False, False, False, False)))


@pytest.fixture
def lemmatizer():
    return FakeLemmatizer()


@pytest.fixture
def summarizer(lemmatizer):
    return Summarizer(lemmatizer)
