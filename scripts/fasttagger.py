#!/usr/bin/env python3

"""lexicon- and rule-based PoS tagging of text"""

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from argparse import ArgumentParser
import logging
import os
import sys

from nltk.tokenize.punkt import PunktSentenceTokenizer
from nltk.tokenize.treebank import TreebankWordTokenizer

from fasttag.lexicon import FASTTAG_LEXICON, readLexicon
from fasttag.tagger import FastTagger

__author__ = 'Florian Leitner'
__version__ = '1.0'

SAMPLE = "The ball rolled down the street."


def textReader(input_stream) -> iter:
    """Split each line of text into sentences of word tokens."""
    splitter = PunktSentenceTokenizer()
    tokenizer = TreebankWordTokenizer()

    for text in input_stream:
        for sentence in splitter.tokenize(text.strip()):
            yield tokenizer.tokenize(sentence)


def tokenizedReader(input_stream) -> iter:
    """Yield each non-empty line as a sentence of space-separated tokens."""
    for line in input_stream:
        words = line.split()

        if words:
            yield words


def slashed(tokens):
    print(*tokens, sep=' ')


def tabular(tokens):
    for t in tokens:
        print(*t, sep='\t')

    print('')


def tagsOnly(tokens):
    print(*(t.tag for t in tokens), sep=' ')


epilog = 'system (default) encoding: {}'.format(sys.getdefaultencoding())
parser = ArgumentParser(
    usage='%(prog)s [options] [FILE ...]',
    description=__doc__, epilog=epilog,
    prog=os.path.basename(sys.argv[0])
)

parser.set_defaults(loglevel=logging.WARNING)
parser.set_defaults(reader=textReader)
parser.set_defaults(output=slashed)
parser.add_argument('files', metavar='FILE', nargs='*', type=open,
                    help='input file(s); if absent, read from <STDIN>')
parser.add_argument('-l', '--lexicon', metavar='LEXICON', default=FASTTAG_LEXICON,
                    help='lexicon file (word TAG1 TAG2 ...) [%(default)s]')
parser.add_argument('--tokenized', action='store_const', const=tokenizedReader,
                    dest='reader', help='input is one space-tokenized sentence per line')
parser.add_argument('--slashed', action='store_const', const=slashed,
                    dest='output', help='print word/tag tokens, one sentence per line [default]')
parser.add_argument('--tabular', action='store_const', const=tabular,
                    dest='output', help='print word and tag columns, one token per line')
parser.add_argument('--tags', action='store_const', const=tagsOnly,
                    dest='output', help='print only the tags, one sentence per line')
parser.add_argument('--version', action='version', version=__version__)
parser.add_argument('--error', action='store_const', const=logging.ERROR,
                    dest='loglevel', help='error log level only [warn]')
parser.add_argument('--info', action='store_const', const=logging.INFO,
                    dest='loglevel', help='info log level [warn]')
parser.add_argument('--debug', action='store_const', const=logging.DEBUG,
                    dest='loglevel', help='debug log level [warn]')
parser.add_argument('--logfile', metavar='FILE',
                    help='log to file instead of <STDERR>')

args = parser.parse_args()

logging.basicConfig(
    filename=args.logfile, level=args.loglevel,
    format='%(asctime)s %(name)s %(levelname)s: %(message)s'
)

if args.files:
    files = args.files
elif sys.stdin.isatty():
    logging.info('no input; tagging the sample sentence "%s"', SAMPLE)
    files = [[SAMPLE]]
else:
    files = [sys.stdin]

try:
    tagger = FastTagger(readLexicon(args.lexicon))
except (OSError, ValueError):
    logging.exception("cannot use lexicon %s", args.lexicon)
    sys.exit(1)

for input_stream in files:
    try:
        for words in args.reader(input_stream):
            args.output(tagger.tag(words))
    except Exception:
        logging.exception("unexpected program error")
        parser.error("unexpected program error")
