"""
.. py:module:: fasttag
   :synopsis: A fast, rule-based part-of-speech tagger.

Taggers in this package adhere to a simple interface::

	tagger.send(words)
	tags = [t for t in tagger]

``words`` is a tokenized sentence (a list of strings) and the tagger yields one
`fasttag.tagger.tagged` (word, tag) pair per word.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""

__version__ = '1'
