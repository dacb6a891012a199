from __future__ import annotations
import logging
from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Sequence, Set, TYPE_CHECKING
from .lemmatizer import Lemmatizer, WordClass

if TYPE_CHECKING:
    from .summarizer import Sentence

logger = logging.getLogger(__name__)

FrequencyTable = Counter  # lemma -> occurrences in the whole document


def count_frequencies(token_lists: Iterable[Sequence[str]]) -> FrequencyTable:
    table: FrequencyTable = Counter()
    for tokens in token_lists:
        table.update(tokens)
    return table


def pos_multiplier(word_class: WordClass) -> int:
    """
    noun only: 6, noun + anything: 3, verb only: 2,
    verb + adj/adv: 1, adj/adv only or unknown: 1
    """
    is_noun, is_verb, is_adj, is_adv = word_class
    if is_noun:
        return 3 if (is_verb or is_adj or is_adv) else 6
    if is_verb:
        return 1 if (is_adj or is_adv) else 2
    return 1


def sentence_weight(tokens: Sequence[str], table: FrequencyTable, lemmatizer: Lemmatizer) -> int:
    return sum(table[t] * pos_multiplier(lemmatizer.classify(t)) for t in tokens)


def build_weight_index(
    sentences: Sequence["Sentence"], table: FrequencyTable, lemmatizer: Lemmatizer
) -> Dict[int, Set[int]]:
    index: Dict[int, Set[int]] = defaultdict(set)
    for s in sentences:
        index[sentence_weight(s.normalized_tokens, table, lemmatizer)].add(s.index)
    return dict(index)


def select_indices(weight_index: Dict[int, Set[int]], max_count: int) -> List[int]:
    # Heaviest bucket first, earlier sentence first within a bucket. The quota
    # cuts straight through a bucket; the rest of the tie is dropped.
    chosen: List[int] = []
    if max_count <= 0:
        return chosen
    for weight in sorted(weight_index, reverse=True):
        for idx in sorted(weight_index[weight]):
            chosen.append(idx)
            if len(chosen) == max_count:
                return sorted(chosen)
    return sorted(chosen)


def rank_and_select(
    sentences: Sequence["Sentence"], table: FrequencyTable, lemmatizer: Lemmatizer, max_count: int
) -> List[str]:
    """Top `max_count` sentences by weight, returned as raw text in document order."""
    weight_index = build_weight_index(sentences, table, lemmatizer)
    by_index = {s.index: s for s in sentences}
    chosen = select_indices(weight_index, max_count)
    logger.debug("selected %d of %d sentences across %d weights", len(chosen), len(sentences), len(weight_index))
    return [by_index[i].raw_text for i in chosen]


def extract_keywords(table: FrequencyTable, lemmatizer: Lemmatizer) -> List[str]:
    # ascending count; ties keep first-appearance order (sort is stable)
    ordered = sorted(table.items(), key=lambda kv: kv[1])
    return [lemma for lemma, _ in ordered if tuple(lemmatizer.classify(lemma)) == (True, False, False, False)]
