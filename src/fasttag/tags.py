"""
.. py:module:: fasttag.tags
   :synopsis: The part-of-speech tags the transformation rules use.

The tag vocabulary is open: any tag found in a lexicon file is a valid tag.
Only the tags the rules test for or produce are named here.

.. moduleauthor:: Florian Leitner <florian.leitner@gmail.com>
.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""

CD = 'CD'
"""cardinal number"""

DT = 'DT'
"""determiner"""

JJ = 'JJ'
"""adjective"""

NN = 'NN'
"""noun, singular or mass"""

NNS = 'NNS'
"""noun, plural"""

RB = 'RB'
"""adverb"""

VB = 'VB'
"""verb, base form"""

VBD = 'VBD'
"""verb, past tense"""

VBG = 'VBG'
"""verb, gerund or present participle"""

VBN = 'VBN'
"""verb, past participle"""

VBP = 'VBP'
"""verb, non-3rd person singular present"""

UNKNOWN = '^'
"""the tag of unknown single-character tokens"""

NOUN_PREFIX = 'N'
COMMON_NOUN_PREFIX = 'NN'

DETERMINED_VERBS = frozenset({VBD, VBP, VB})
"""verb tags that are nouns after a determiner"""
