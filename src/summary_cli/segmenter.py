from __future__ import annotations
import logging
import re
from typing import Callable, List, Tuple, Union

logger = logging.getLogger(__name__)

Replacement = Union[str, Callable[[re.Match], str]]

# Protection passes. Order matters: each pattern must not re-match text an
# earlier pass already protected.
ENCODE_RULES: List[Tuple[re.Pattern, Replacement]] = [
    # "et al.." -> inner period protected, sentence end kept
    (re.compile(r"(?P<comp>et al)\.\."), r"\g<comp>&;&."),
    # suspension points
    (re.compile(r"\.{3}"), "&&&."),
    # 3.14
    (re.compile(r"(?P<number>[0-9]+)\.(?P<decimal>[0-9]+)"), r"\g<number>&@&\g<decimal>"),
    # .5
    (re.compile(r"\s\.(?P<nums>[0-9]+)"), r" &#&\g<nums>"),
    # U.S.A.
    (re.compile(r"(?:[A-Za-z]\.){2,}"), lambda m: m.group(0).replace(".", "&-&")),
    # initials
    (re.compile(r"(?P<init>[A-Z])\."), r"\g<init>&_&"),
    # Mr. Dr. Mrs.
    (re.compile(r"(?P<title>[A-Z][a-z]{1,3})\."), r"\g<title>&*&"),
    # "End.Next" -> "End. Next"
    (re.compile(r"(?P<left>[^.?!]\.|!|\?)(?P<right>[^\s\"'])"), r"\g<left> \g<right>"),
    # terminators that belong before a closing paren or quote
    (re.compile(r"(?P<bef>[.?!])\s?\)"), r"&==&\g<bef>"),
    (re.compile(r"'(?P<quote>[.?!])\s?\""), r"&^&\g<quote>"),
    (re.compile(r"'(?P<quote>[.?!])\s?”"), r"&**&\g<quote>"),
    (re.compile(r"(?P<quote>[.?!])\s?”"), r"&=&\g<quote>"),
    (re.compile(r"(?P<quote>[.?!])\s?'\""), r"&,&\g<quote>"),
    (re.compile(r"(?P<quote>[.?!])\s?'"), r"&##&\g<quote>"),
    (re.compile(r"(?P<quote>[.?!])\s?\""), r"&$&\g<quote>"),
]

# Plain placeholders, restored first.
DECODE_LITERALS: List[Tuple[str, str]] = [
    ("&;&", "."),
    ("&&&", ".."),
    ("&@&", "."),
    ("&#&", "."),
    ("&-&", "."),
    ("&_&", "."),
    ("&*&", "."),
]

# Placeholders carrying a terminator that moves back in front of its quote/paren.
# Quotes first: in .)" the paren marker sits in front of the quote marker.
DECODE_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"&\^&(?P<p>[.!?])"), "'\\g<p>\""),
    (re.compile(r"&\*\*&(?P<p>[.!?])"), r"'\g<p>”"),
    (re.compile(r"&=&(?P<p>[.!?])"), r"\g<p>”"),
    (re.compile(r"&,&(?P<p>[.!?])"), "\\g<p>'\""),
    (re.compile(r"&##&(?P<p>[.!?])"), r"\g<p>'"),
    (re.compile(r"&\$&(?P<p>[.!?])"), r'\g<p>"'),
    (re.compile(r"&==&(?P<p>[.!?])"), r"\g<p>)"),
]

SPLIT_ORDER = ("!", "?", ".")


def protect(text: str) -> str:
    for pattern, repl in ENCODE_RULES:
        text = pattern.sub(repl, text)
    return text


def restore(fragment: str) -> str:
    for marker, original in DECODE_LITERALS:
        fragment = fragment.replace(marker, original)
    for pattern, repl in DECODE_RULES:
        fragment = pattern.sub(repl, fragment)
    return fragment


def _split_keep(fragments: List[str], delim: str) -> List[str]:
    # every piece but the last gets its delimiter back
    out: List[str] = []
    for frag in fragments:
        parts = frag.split(delim)
        out.extend(p + delim for p in parts[:-1])
        out.append(parts[-1])
    return out


def segment(text: str) -> List[str]:
    """
    Split text into sentences, keeping each sentence's own punctuation.

    Periods that do not end a sentence (abbreviations, decimals, initials,
    titles) are swapped for placeholders, the text is split on every
    remaining terminator, and the placeholders are restored per fragment.
    """
    fragments = [protect(text)]
    for delim in SPLIT_ORDER:
        fragments = _split_keep(fragments, delim)

    sentences = []
    for frag in fragments:
        s = restore(frag.strip())
        if len(s) > 1:
            sentences.append(s)
    logger.debug("segmented %d chars into %d sentences", len(text), len(sentences))
    return sentences
