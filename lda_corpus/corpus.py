import os
import sys
from numbers import Integral

from lda_corpus.document import Document
from lda_corpus.errors import (InvalidArgumentError, InvalidInputError, InvalidDocumentError,
                               MalformedLineError, OversizedLineError)
from lda_corpus.utils import open_or_gz

# Lines shorter than this are noise (blank lines, stray headers) and get skipped
MIN_LINE_LENGTH = 15
MAX_LINE_LENGTH = 4096


class Corpus:
    """
    Ordered documents under joint training, in input order. Append-only
    while loading, read-only as a collection afterwards.
    """
    def __init__(self):
        self.documents = []

    def append(self, d):
        self.documents.append(d)

    def __len__(self):
        return len(self.documents)

    def __iter__(self):
        return iter(self.documents)

    def __getitem__(self, i):
        return self.documents[i]

    def num_occurrences(self):
        return sum(d.length() for d in self.documents)

    def shard(self, shards, this_shard):
        """
        Documents owned by worker this_shard out of shards. Shards are
        disjoint, so each worker can run cursors on its own documents.
        """
        check_shard(shards, this_shard)
        return [d for i, d in enumerate(self.documents) if i % shards == this_shard]


def check_shard(shards, this_shard):
    if shards < 1:
        raise InvalidArgumentError('shards must be >= 1, got %d' % shards)
    if this_shard < 0 or this_shard >= shards:
        raise InvalidArgumentError('this_shard must be in [0, %d), got %d' % (shards, this_shard))


def iter_lines(f, max_line_length):
    """
    Yield (line_no, line) with the newline removed, failing on any line
    longer than max_line_length instead of truncating it.
    """
    # Room for the line plus a \r\n terminator
    limit = max_line_length + 2
    line_no = 0
    while True:
        raw = f.readline(limit)
        if not raw:
            return
        if raw.endswith('\r\n'):
            line = raw[:-2]
        elif raw.endswith('\n'):
            line = raw[:-1]
        else:
            # No terminator: the last line before EOF, or a chunk cut at the limit
            line = raw
        if len(line) > max_line_length:
            raise OversizedLineError(line_no + 1, max_line_length)
        yield line_no, line
        line_no += 1


def load_corpus(source, num_topics, min_line_length=MIN_LINE_LENGTH, max_line_length=MAX_LINE_LENGTH,
                shards=1, this_shard=0):
    """
    Build a Corpus from one document per line of source, a path (plain or
    gzipped) or an open text stream.

    Short lines are skipped. An oversized line, or a long enough line that
    does not make a valid document, fails the whole load.
    """
    if isinstance(num_topics, bool) or not isinstance(num_topics, Integral) or num_topics < 2:
        raise InvalidArgumentError('num_topics must be an int >= 2, got %r' % (num_topics,))
    check_shard(shards, this_shard)

    if hasattr(source, 'readline'):
        return read_corpus(source, num_topics, min_line_length, max_line_length, shards, this_shard,
                           name=getattr(source, 'name', '<stream>'))

    filename = os.fspath(source)
    with open_or_gz(filename) as f:
        return read_corpus(f, num_topics, min_line_length, max_line_length, shards, this_shard, name=filename)


def read_corpus(f, num_topics, min_line_length, max_line_length, shards, this_shard, name):
    corpus = Corpus()
    processed = 0
    for line_no, line in iter_lines(f, max_line_length):
        if line_no % shards != this_shard:
            continue
        if len(line) < min_line_length:
            continue
        try:
            d = Document(line, num_topics)
        except (InvalidInputError, InvalidDocumentError) as e:
            raise MalformedLineError(line_no + 1, line, e) from e
        corpus.append(d)
        processed += 1
        if processed % 1000 == 0:
            sys.stderr.write('... loaded %d documents [line %d]\n' % (processed, line_no + 1))
    sys.stderr.write('Loaded %d docs from [%s]\n' % (processed, name))
    return corpus
