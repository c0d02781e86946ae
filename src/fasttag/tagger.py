"""
.. py:module:: fasttag.tagger
   :synopsis: Tag tokenized sentences with a lexicon and the transformation rules.

Tagging a sentence is strictly sequential, because rules 1 and 6 depend on the
preceding token. Independent sentences can be tagged concurrently, as the
lexicon is never modified and each sentence is tagged with its own state.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""

from collections import deque
from operator import itemgetter
import logging

from fasttag.lexicon import Lexicon
from fasttag.rules import lookback, transform


class tagged(tuple):

    """
    A tagged token: the pair of a ``word`` and its PoS ``tag``.

    The string representation is the customary ``word/tag`` format.
    """

    __slots__ = ()

    def __new__(cls, word, tag):
        assert isinstance(word, str)
        assert tag, 'empty tag for %r' % word
        return tuple.__new__(cls, (word, tag))

    word = property(itemgetter(0), doc="the token string")
    tag = property(itemgetter(1), doc="the PoS tag")

    def __repr__(self) -> str:
        return 'tagged(%r, %r)' % self

    def __str__(self) -> str:
        return '%s/%s' % self


def tagWord(lexicon: Lexicon, word: str, history: lookback=lookback.EMPTY) -> tuple:
    """
    Tag a single `word`, given the state after the word preceding it.

    Without a `history`, the word is tagged as if it were the first word of
    a sentence.

    :param lexicon: to look up the word's candidate tags
    :param word: to tag
    :param history: the state returned for the previous word
    :return: a ``(tagged, lookback)`` tuple
    """
    tag, history = transform(word, lexicon.lookup(word), history)
    return tagged(word, tag), history


def tagSequence(lexicon: Lexicon, words) -> list:
    """
    Tag a sentence.

    :param lexicon: to look up the words' candidate tags
    :param words: the tokens of one sentence
    :return: a list of :class:`tagged` tokens, one per word and in order
    """
    history = lookback.EMPTY
    result = []

    for word in words:
        token, history = tagWord(lexicon, word, history)
        result.append(token)

    return result


def tagSentences(lexicon: Lexicon, sentences) -> iter:
    """Yield the tagged tokens (as lists) of each sentence in turn."""
    for words in sentences:
        yield tagSequence(lexicon, words)


class FastTagger(object):
    """
    A lexicon- and rule-based PoS tagger.

    Send it a tokenized sentence and iterate over it to get the tagged tokens.
    """

    L = logging.getLogger("FastTagger")

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon
        self._tokens = deque()

    def __call__(self, words) -> list:
        return self.tag(words)

    def __iter__(self):
        return self

    def __next__(self) -> tagged:
        if not self._tokens:
            raise StopIteration

        return self._tokens.popleft()

    def send(self, words):
        """
        Send a single tokenized sentence to the tagger.

        Tokens from earlier sentences that have not been fetched yet are
        fetched before the new ones.
        """
        self.L.debug('sending sentence: %s', words)
        self._tokens.extend(self.tag(words))

    def tag(self, words) -> list:
        """Return the list of tagged tokens for a tokenized sentence."""
        return tagSequence(self.lexicon, words)
