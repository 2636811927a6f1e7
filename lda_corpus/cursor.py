from numbers import Integral

from lda_corpus.errors import InvalidArgumentError, InvalidDocumentError, IllegalStateError


class OccurrenceCursor:
    """
    Forward-only walk over every word occurrence of a Document, in storage
    order (grouped by word, words ascending). At each stop the owner may
    read the word and topic and overwrite the topic; the document's topic
    histogram follows every overwrite.

    Opening a cursor revokes any earlier cursor on the same document, so at
    most one of them can read or write at a time.

    State:
      - position: index into the document's assignment
      - word_index: index into unique_words owning that position
      - done flag, set after the last occurrence
    """

    def __init__(self, doc):
        if doc is None:
            raise InvalidDocumentError('OccurrenceCursor with a None document')
        if not doc.is_valid():
            raise InvalidDocumentError('OccurrenceCursor with an invalid document')
        doc._cursor_generation += 1
        self.doc = doc
        self._generation = doc._cursor_generation
        self._position = 0
        self._word_index = 0
        self._done = False

    def _check_owner(self):
        if self._generation != self.doc._cursor_generation:
            raise IllegalStateError('Cursor was revoked by a newer cursor on the same document')

    def _check_active(self, op):
        self._check_owner()
        if self._done:
            raise IllegalStateError('Must not call %s() when is_done() is true' % op)

    def is_done(self):
        # A finished walk stays done even after a newer cursor takes over
        if self._done:
            return True
        self._check_owner()
        return False

    @property
    def position(self):
        self._check_owner()
        return self._position

    def advance(self):
        self._check_active('advance')
        self._position += 1
        if self._position >= self.doc.length():
            self._done = True
            return
        offsets = self.doc.word_offsets
        while self._position >= offsets[self._word_index + 1]:
            self._word_index += 1

    def current_word(self):
        self._check_active('current_word')
        return self.doc.unique_words[self._word_index]

    def current_topic(self):
        self._check_active('current_topic')
        return self.doc._assignment[self._position]

    def set_topic(self, new_topic):
        self._check_active('set_topic')
        if isinstance(new_topic, bool) or not isinstance(new_topic, Integral):
            raise InvalidArgumentError('new_topic must be an int, got %r' % (new_topic,))
        if new_topic < 0 or new_topic >= self.doc.num_topics:
            raise InvalidArgumentError('new_topic (%d) not in [0, %d)' % (new_topic, self.doc.num_topics))
        self.doc._reassign(self._position, int(new_topic))

    def close(self):
        """ Abandon the walk; the cursor reads as done from here on """
        self._done = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


def open_cursor(doc):
    return OccurrenceCursor(doc)
