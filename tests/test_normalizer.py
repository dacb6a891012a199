from summary_cli.lemmatizer import NOUN, VERB, ADJ, ADV
from summary_cli.normalizer import STOP_WORDS, TextNormalizer


def test_stop_words_removed(lemmatizer):
    assert "the" in STOP_WORDS
    assert TextNormalizer(lemmatizer).normalize("The cat sat") == ["cat", "sit"]


def test_punctuation_and_quotes_stripped(lemmatizer):
    norm = TextNormalizer(lemmatizer)
    assert norm.normalize("The “dogs”, barked.") == ["dog", "bark"]
    assert norm.normalize("Dog's toy") == ["dog", "toy"]


def test_lemmatized_in_noun_verb_adj_adv_order(lemmatizer):
    TextNormalizer(lemmatizer).normalize("Cats ran happier")
    assert [pos for pos, _ in lemmatizer.calls] == [NOUN, VERB, ADJ, ADV]
    # each pass consumes the previous pass's output
    assert lemmatizer.calls[1][1] == "cat ran happier"
    assert lemmatizer.calls[2][1] == "cat run happier"


def test_duplicates_and_order_preserved(lemmatizer):
    assert TextNormalizer(lemmatizer).normalize("cats chase cats") == ["cat", "chase", "cat"]


def test_only_stop_words(lemmatizer):
    assert TextNormalizer(lemmatizer).normalize("It is what it is.") == []


def test_custom_stop_words_are_case_folded(lemmatizer):
    norm = TextNormalizer(lemmatizer, stop_words=["Cat"])
    assert norm.normalize("The cat sat") == ["the", "sit"]
