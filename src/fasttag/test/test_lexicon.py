"""lexicon module tests"""

from io import StringIO
from pytest import raises
from fasttag.lexicon import Lexicon, getTagsFromLine, lexiconReader, readLexicon

ENTRIES = [
    ('the', ('DT',)),
    ('Will', ('NNP',)),
    ('will', ('MD', 'VBP', 'NN')),
    ('run', ('VB', 'NN', 'VBP')),
]


class TestGetTagsFromLine():

    """split lexicon lines"""

    def test_single_tag(self):
        assert ('the', ('DT',)) == getTagsFromLine('the DT')

    def test_ordered_tags(self):
        assert ('run', ('VB', 'NN', 'VBP')) == getTagsFromLine('run VB NN VBP')

    def test_drop_empty_fields(self):
        assert ('a', ('DT', 'NN')) == getTagsFromLine('a  DT NN ')

    def test_no_tags(self):
        assert ('word', ()) == getTagsFromLine('word ')


class TestLexiconReader():

    """read lexicon streams"""

    def test_read(self):
        stream = StringIO('the DT\nball NN\n')
        assert [('the', ('DT',)), ('ball', ('NN',))] == list(lexiconReader(stream))

    def test_skip_lines_without_space(self):
        stream = StringIO('the DT\nnospace\n\nball NN')
        assert ['the', 'ball'] == [w for w, _ in lexiconReader(stream)]

    def test_skip_lines_without_tags(self):
        stream = StringIO('word \nthe DT\n')
        assert [('the', ('DT',))] == list(lexiconReader(stream))

    def test_strip_line_ends(self):
        stream = StringIO('the DT\r\nball NN NNP\r\n')
        assert [('the', ('DT',)), ('ball', ('NN', 'NNP'))] == list(lexiconReader(stream))

    def test_punctuation_entries(self):
        stream = StringIO('. .\n, ,\n')
        assert [('.', ('.',)), (',', (',',))] == list(lexiconReader(stream))


class TestLexicon():

    """look up words"""

    def test_lookup(self):
        lex = Lexicon(ENTRIES)
        assert ('DT',) == lex.lookup('the')
        assert ('VB', 'NN', 'VBP') == lex.lookup('run')

    def test_lookup_lowercase_fallback(self):
        lex = Lexicon(ENTRIES)
        assert ('DT',) == lex.lookup('The')
        assert ('DT',) == lex.lookup('THE')

    def test_lookup_prefers_exact_match(self):
        lex = Lexicon(ENTRIES)
        assert ('NNP',) == lex.lookup('Will')
        assert ('MD', 'VBP', 'NN') == lex.lookup('will')
        assert ('MD', 'VBP', 'NN') == lex.lookup('WILL')

    def test_lookup_is_case_sensitive_on_lowercase_input(self):
        lex = Lexicon([('NASA', ('NNP',))])
        assert lex.lookup('nasa') is None

    def test_lookup_unknown(self):
        lex = Lexicon(ENTRIES)
        assert lex.lookup('ball') is None

    def test_lookup_repeatable(self):
        lex = Lexicon(ENTRIES)
        assert lex.lookup('The') == lex.lookup('The')
        assert len(ENTRIES) == len(lex)

    def test_contains(self):
        lex = Lexicon(ENTRIES)
        assert lex.contains('the')
        assert lex.contains('The')
        assert 'RUN' in lex
        assert not lex.contains('ball')
        assert 'ball' not in lex

    def test_last_entry_wins(self):
        lex = Lexicon([('run', ('VB',)), ('run', ('NN',))])
        assert ('NN',) == lex.lookup('run')
        assert 1 == len(lex)

    def test_tags_are_tuples(self):
        lex = Lexicon([('run', ['VB', 'NN'])])
        assert ('VB', 'NN') == lex.lookup('run')

    def test_iter(self):
        assert [w for w, _ in ENTRIES] == list(Lexicon(ENTRIES))

    def test_empty(self):
        lex = Lexicon(())
        assert 0 == len(lex)
        assert lex.lookup('the') is None

    def test_no_tags(self):
        with raises(ValueError):
            Lexicon([('the', ())])


class TestReadLexicon():

    """read lexicon files"""

    def test_read(self, tmp_path):
        path = tmp_path / 'lexicon.txt'
        path.write_text('the DT\nmalformed\nball NN NNP\n', encoding='utf-8')
        lex = readLexicon(str(path))
        assert 2 == len(lex)
        assert ('NN', 'NNP') == lex.lookup('Ball')

    def test_read_encoding(self, tmp_path):
        path = tmp_path / 'lexicon.txt'
        path.write_text('café NN\n', encoding='latin-1')
        lex = readLexicon(str(path), encoding='latin-1')
        assert ('NN',) == lex.lookup('café')

    def test_missing_file(self, tmp_path):
        with raises(OSError):
            readLexicon(str(tmp_path / 'missing.txt'))

    def test_bad_encoding(self, tmp_path):
        path = tmp_path / 'lexicon.txt'
        path.write_bytes(b'caf\xe9 NN\n')

        with raises(UnicodeDecodeError):
            readLexicon(str(path), encoding='utf-8')
