# tests/test_corpus.py
import gzip
import io

import pytest

from lda_corpus.corpus import Corpus, load_corpus, MAX_LINE_LENGTH
from lda_corpus.document import build_document
from lda_corpus.errors import (InvalidArgumentError, InvalidInputError, MalformedLineError,
                               OversizedLineError)


def test_short_lines_skipped():
    src = io.StringIO("hi\nthis line is long enough\n\n")
    corpus = load_corpus(src, 3)
    assert len(corpus) == 1
    assert corpus[0].unique_words == ("enough", "is", "line", "long", "this")


def test_threshold_is_inclusive():
    src = io.StringIO("abcdefg hijklmn\nabcdefg hijklm\n")  # 15 and 14 characters
    corpus = load_corpus(src, 2)
    assert len(corpus) == 1
    assert corpus[0].unique_words == ("abcdefg", "hijklmn")


def test_custom_min_line_length():
    corpus = load_corpus(io.StringIO("a b\nc d e\n"), 2, min_line_length=0)
    assert [d.length() for d in corpus] == [2, 3]


def test_oversized_line_fails_whole_load():
    src = io.StringIO("hi\nthis line is long enough\n" + "word " * 2000 + "\n")
    with pytest.raises(OversizedLineError) as e:
        load_corpus(src, 3)
    assert e.value.line_no == 3
    assert isinstance(e.value, IOError)


def test_line_at_max_length_accepted():
    line = ("ab " * 20)[:MAX_LINE_LENGTH]
    corpus = load_corpus(io.StringIO(line + "\r\n" + "x" * 20 + " y\n"), 2, max_line_length=len(line))
    assert len(corpus) == 2


def test_line_over_max_length_rejected():
    with pytest.raises(OversizedLineError):
        load_corpus(io.StringIO("a" * 11 + " b\n"), 2, min_line_length=0, max_line_length=12)


def test_malformed_line_halts_load():
    src = io.StringIO("this line is long enough\nsupercalifragilistic\nanother fine document\n")
    with pytest.raises(MalformedLineError) as e:
        load_corpus(src, 3)
    assert e.value.line_no == 2
    assert "supercalifragilistic" in str(e.value)
    assert isinstance(e.value, InvalidInputError)
    assert isinstance(e.value.__cause__, InvalidInputError)


def test_bad_num_topics():
    with pytest.raises(InvalidArgumentError):
        load_corpus(io.StringIO("this line is long enough\n"), 1)


def test_input_order_kept():
    src = io.StringIO("zebra zebra crossing\napple banana cherry\nmango papaya guava\n")
    corpus = load_corpus(src, 2)
    assert [d.unique_words[0] for d in corpus] == ["crossing", "apple", "guava"]
    assert corpus.num_occurrences() == 9


def test_load_from_path_and_gz(tmp_path):
    text = "hi\nthe first document here\nthe second document here\n"
    plain = tmp_path / "docs.txt"
    plain.write_text(text, encoding="utf-8")
    packed = tmp_path / "docs.txt.gz"
    with gzip.open(packed, "wt", encoding="utf-8") as f:
        f.write(text)

    for path in (plain, str(packed)):
        corpus = load_corpus(path, 4)
        assert len(corpus) == 2
        assert corpus[1].topic_histogram == (4, 0, 0, 0)


def test_missing_file_is_io_error(tmp_path):
    with pytest.raises(IOError):
        load_corpus(str(tmp_path / "missing.txt"), 2)


def test_load_reports_to_stderr(capsys):
    load_corpus(io.StringIO("this line is long enough\n"), 2)
    assert "Loaded 1 docs" in capsys.readouterr().err


def test_sharded_load_is_disjoint():
    lines = ["document number %d here" % i for i in range(7)]
    text = "\n".join(lines) + "\n"
    seen = []
    for s in range(3):
        corpus = load_corpus(io.StringIO(text), 2, shards=3, this_shard=s)
        seen.extend(d.unique_words for d in corpus)
    assert sorted(seen) == sorted(build_document(l, 2).unique_words for l in lines)


def test_shard_checks_arguments():
    with pytest.raises(InvalidArgumentError):
        load_corpus(io.StringIO(""), 2, shards=2, this_shard=2)
    with pytest.raises(InvalidArgumentError):
        Corpus().shard(0, 0)


def test_corpus_shard():
    corpus = Corpus()
    docs = [build_document("doc %d words" % i, 2) for i in range(5)]
    for d in docs:
        corpus.append(d)
    assert corpus.shard(2, 0) == [docs[0], docs[2], docs[4]]
    assert corpus.shard(2, 1) == [docs[1], docs[3]]
    assert list(corpus) == docs


def test_bare_carriage_returns_do_not_split_oversized_line():
    src = io.StringIO("aaaaa bbbbbb\r\rccc ddd eee\n")
    with pytest.raises(OversizedLineError) as e:
        load_corpus(src, 2, min_line_length=0, max_line_length=12)
    assert e.value.line_no == 1


def test_last_line_without_newline_accepted():
    corpus = load_corpus(io.StringIO("aaaaa bbbbbb\nccc ddd"), 2, min_line_length=0, max_line_length=12)
    assert [d.unique_words for d in corpus] == [("aaaaa", "bbbbbb"), ("ccc", "ddd")]


def test_integral_num_topics_accepted(topic_count):
    corpus = load_corpus(io.StringIO("this line is long enough\n"), topic_count(3))
    assert corpus[0].topic_histogram == (5, 0, 0)
