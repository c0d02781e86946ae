"""
.. py:module:: fasttag.rules
   :synopsis: The transformation rules that correct the initial PoS tags.

Each token is first assigned its default lexicon tag (rule 0); the tag is then
passed through the rules 1 to 8, in that order. Rules 1 and 6 look at the
previous token of the sentence: its final tag and its word, respectively.
That state is an explicit `lookback` value returned from :func:`transform`
and passed into the call for the next token.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""

from operator import itemgetter
import re

from fasttag import tags

NUMBER = re.compile(r"""
    [+-]?
    (?:
        NaN
      | Infinity
      | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?[fFdD]?
    )
""", re.VERBOSE)
"""Decimal floating-point literals, including ``NaN`` and ``Infinity``."""


class lookback(tuple):

    """
    The state rules 1 and 6 need from the previous token of a sentence.

    1. ``tag`` - the final tag of the previous token
    1. ``word`` - the word of the previous token

    Both are ``None`` before the first token (see ``lookback.EMPTY``).
    """

    __slots__ = ()

    def __new__(cls, tag=None, word=None):
        return tuple.__new__(cls, (tag, word))

    tag = property(itemgetter(0), doc="the previous token's final tag")
    word = property(itemgetter(1), doc="the previous token's word")

    def __repr__(self) -> str:
        return 'lookback(tag=%r, word=%r)' % self

    def advance(self, tag: str, word: str):
        """Return the state for the token following (`word`, `tag`)."""
        return lookback(tag, word)


lookback.EMPTY = lookback()
"""The state at the start of a sentence."""


def isNumber(word: str) -> bool:
    """Return ``True`` if the whole `word` is a floating-point literal."""
    return NUMBER.fullmatch(word) is not None


def initial(word: str, candidates) -> str:
    """
    Rule 0: assign the default tag from the lexicon `candidates`.

    Unknown words are nouns, unless they are a single character long.
    """
    if candidates:
        return candidates[0]
    elif len(word) == 1:
        return tags.UNKNOWN
    else:
        return tags.NN


def determinerVerb(word: str, tag: str, previous_tag) -> str:
    """Rule 1: DT, {VBD | VBP | VB} --> DT, NN"""
    if previous_tag == tags.DT and tag in tags.DETERMINED_VERBS:
        return tags.NN

    return tag


def numeral(word: str, tag: str) -> str:
    """Rule 2: a noun that contains a dot or is a number is a numeral (CD)."""
    if tag.startswith(tags.NOUN_PREFIX) and ('.' in word or isNumber(word)):
        return tags.CD

    return tag


def pastParticiple(word: str, tag: str) -> str:
    """Rule 3: a noun ending in "ed" is a past participle (VBN)."""
    if tag.startswith(tags.NOUN_PREFIX) and word.endswith('ed'):
        return tags.VBN

    return tag


def adverb(word: str, tag: str) -> str:
    """Rule 4: any word ending in "ly" is an adverb (RB)."""
    return tags.RB if word.endswith('ly') else tag


def adjective(word: str, tag: str) -> str:
    """Rule 5: a common noun (NN or NNS) ending in "al" is an adjective (JJ)."""
    if tag.startswith(tags.COMMON_NOUN_PREFIX) and word.endswith('al'):
        return tags.JJ

    return tag


def wouldVerb(word: str, tag: str, previous_word) -> str:
    """Rule 6: a common noun after "would" is a verb (VB)."""
    if previous_word is not None and tag.startswith(tags.COMMON_NOUN_PREFIX) and \
            previous_word.lower() == 'would':
        return tags.VB

    return tag


def plural(word: str, tag: str) -> str:
    """Rule 7: a singular common noun ending in "s" is plural (NNS)."""
    return tags.NNS if tag == tags.NN and word.endswith('s') else tag


def gerund(word: str, tag: str) -> str:
    """Rule 8: a singular common noun ending in "ing" is a gerund (VBG)."""
    return tags.VBG if tag == tags.NN and word.endswith('ing') else tag


def transform(word: str, candidates, history: lookback=lookback.EMPTY) -> tuple:
    """
    Run all rules on a single token.

    :param word: the token
    :param candidates: the token's lexicon tags (or ``None`` if unknown)
    :param history: the state after the previous token of the sentence
    :return: a ``(tag, lookback)`` tuple: the final tag of the token and
             the state to use for the next token
    """
    tag = initial(word, candidates)
    tag = determinerVerb(word, tag, history.tag)
    tag = numeral(word, tag)
    tag = pastParticiple(word, tag)
    tag = adverb(word, tag)
    tag = adjective(word, tag)
    tag = wouldVerb(word, tag, history.word)
    tag = plural(word, tag)
    tag = gerund(word, tag)
    return tag, history.advance(tag, word)
