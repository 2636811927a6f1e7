from collections import Counter
from numbers import Integral

from lda_corpus.cursor import OccurrenceCursor
from lda_corpus.errors import InvalidArgumentError, InvalidInputError, InvalidDocumentError
from lda_corpus.text import tokenize


# A document holds some unique words, each with one or more occurrences.
# Every occurrence carries a topic assignment in [0, num_topics).
#
# Occurrences are stored grouped by word, so word_offsets maps each
# unique word to its run of assignments:
#
# unique_words:   WORD1     WORD2  WORD3
# word_offsets:   0         4      6      7
# assignment:     0 3 4 0   0 3    1
#
class Document:
    def __init__(self, text, num_topics):
        if isinstance(num_topics, bool) or not isinstance(num_topics, Integral) or num_topics < 2:
            raise InvalidArgumentError('num_topics must be an int >= 2, got %r' % (num_topics,))
        num_topics = int(num_topics)

        words = tokenize(text)
        if len(words) < 2:
            raise InvalidInputError('Document less than 2 words: %r' % (text,))
        words.sort()

        unique_words = []
        word_offsets = []
        prev_word = None
        for i, w in enumerate(words):
            if w != prev_word:
                prev_word = w
                unique_words.append(w)
                word_offsets.append(i)
        word_offsets.append(len(words))

        self.unique_words = tuple(unique_words)
        self.word_offsets = tuple(word_offsets)
        self._assignment = [0] * len(words)
        self._histogram = [0] * num_topics
        self._histogram[0] = len(words)

        # Bumped by every new cursor; older cursors see the mismatch and refuse to run
        self._cursor_generation = 0

        if not self.is_valid():
            raise InvalidDocumentError('Document is invalid: %r' % (text,))

    @property
    def num_topics(self):
        return len(self._histogram)

    @property
    def nd(self):
        return len(self._assignment)

    def length(self):
        return len(self._assignment)

    def __len__(self):
        return len(self._assignment)

    @property
    def topic_histogram(self):
        return tuple(self._histogram)

    @property
    def topic_labels(self):
        return tuple(self._assignment)

    def word_counts(self):
        """ Yield (word, occurrences) for each unique word, in sorted order """
        for i, w in enumerate(self.unique_words):
            yield w, self.word_offsets[i+1] - self.word_offsets[i]

    def is_valid(self):
        words, offsets = self.unique_words, self.word_offsets
        n, k = len(self._assignment), len(self._histogram)
        if len(words) < 1 or n < 2 or k < 2:
            return False
        if any(a >= b for a, b in zip(words, words[1:])):
            return False
        if len(offsets) != len(words) + 1 or offsets[0] != 0 or offsets[-1] != n:
            return False
        if any(a > b for a, b in zip(offsets, offsets[1:])):
            return False
        if any(z < 0 or z >= k for z in self._assignment):
            return False
        counts = Counter(self._assignment)
        return all(self._histogram[z] == counts[z] for z in range(k))

    def validate(self):
        if not self.is_valid():
            raise InvalidDocumentError('Document failed its invariant check')

    def cursor(self):
        return OccurrenceCursor(self)

    def _reassign(self, i, newz):
        """
        Move occurrence i to topic newz. The histogram and the assignment
        change together here and nowhere else.
        """
        oldz = self._assignment[i]
        self._histogram[oldz] -= 1
        self._histogram[newz] += 1
        self._assignment[i] = newz

    def __repr__(self):
        return '<Document words=%d occurrences=%d topics=%d>' % (len(self.unique_words), self.nd, self.num_topics)


def build_document(text, num_topics):
    """
    Parse a whitespace separated text record into a Document with every
    occurrence assigned to topic 0.
    """
    return Document(text, num_topics)
