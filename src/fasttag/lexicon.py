"""
.. py:module:: fasttag.lexicon
   :synopsis: Look up the candidate PoS tags of words.

A lexicon file has one entry per line, with the fields separated by single
spaces::

    word TAG1 TAG2 ...

The first tag of an entry is the default (most likely) tag of that word.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""

import logging
import os

FASTTAG_LEXICON = os.environ.get('FASTTAG_LEXICON', 'lexicon.txt')
"""
The default path of the lexicon file, ``lexicon.txt`` in the working directory,
or as set in the environment.
"""

L = logging.getLogger("fasttag.lexicon")


def getTagsFromLine(line: str) -> tuple:
    """
    Split a lexicon `line` into the word and its tags.

    :param line: a lexicon entry (w/o newline)
    :return: a ``(word, tags)`` tuple; the tags are a (possibly empty) tuple
    """
    word, *tags = line.split(' ')
    return word, tuple(t for t in tags if t)


def lexiconReader(instream) -> iter:
    """
    Create an iterator over the entries of a lexicon input stream.

    Lines without a space or without any tag are skipped.

    :param instream: the lexicon file's lines
    :return: an iterator over (word:str, tags:tuple) tuples
    """
    for num, line in enumerate(instream, 1):
        line = line.rstrip('\r\n')

        if ' ' not in line:
            L.debug('skipping line %i: no space in "%s"', num, line)
            continue

        word, tags = getTagsFromLine(line)

        if tags:
            yield word, tags
        else:
            L.debug('skipping line %i: no tags for "%s"', num, word)


class Lexicon(object):
    """
    A read-only mapping of (case-sensitive) words to their candidate tags.

    Lookups fall back to the lower-cased word if the word itself is not found.
    """

    def __init__(self, data: iter):
        """
        Initialize a new Lexicon from a data iterator.

        If a word occurs more than once, the last entry is used.

        :param data: an iterator over (word, tags) tuples
        :raises ValueError: if any word has no tags
        """
        entries = {}

        for word, tags in data:
            tags = tuple(tags)

            if not tags:
                raise ValueError('no tags for word %r' % word)

            entries[word] = tags

        self._entries = entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> iter:
        return iter(self._entries)

    def __contains__(self, word) -> bool:
        return self.contains(word)

    def __repr__(self) -> str:
        return 'Lexicon<%i entries>' % len(self._entries)

    def lookup(self, word: str):
        """
        Return the candidate tags of `word`, or ``None`` if it is unknown.

        The exact `word` is tried first, then its lower-cased form.

        :param word: to look up
        :return: a tuple of tags with the default tag first or ``None``
        """
        tags = self._entries.get(word)

        if tags is None:
            tags = self._entries.get(word.lower())

        return tags

    def contains(self, word: str) -> bool:
        """Return ``True`` if the `word` or its lower-cased form is known."""
        return word in self._entries or word.lower() in self._entries


def readLexicon(path: str=FASTTAG_LEXICON, encoding: str='utf-8') -> Lexicon:
    """
    Read a lexicon file.

    Any error while reading the file is logged and raised again; no lexicon
    is built from a file that could not be read completely.

    :param path: of the lexicon file
    :param encoding: of the lexicon file
    :return: a :class:`Lexicon`
    :raises OSError: if the file cannot be read
    :raises UnicodeDecodeError: if the file is not in the given encoding
    """
    L.debug("reading lexicon '%s'", path)

    try:
        with open(path, encoding=encoding) as instream:
            lexicon = Lexicon(lexiconReader(instream))
    except (OSError, UnicodeDecodeError) as e:
        L.error("failed to read lexicon '%s': %s", path, e)
        raise

    L.info("read %i lexicon entries from '%s'", len(lexicon), path)
    return lexicon
