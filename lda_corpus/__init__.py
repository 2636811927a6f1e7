from lda_corpus.errors import (LDACorpusError, InvalidArgumentError, InvalidInputError, MalformedLineError,
                               InvalidDocumentError, IllegalStateError, OversizedLineError)
from lda_corpus.text import tokenize, remove_symbols
from lda_corpus.document import Document, build_document
from lda_corpus.cursor import OccurrenceCursor, open_cursor
from lda_corpus.corpus import Corpus, load_corpus

__all__ = [
    "LDACorpusError",
    "InvalidArgumentError",
    "InvalidInputError",
    "MalformedLineError",
    "InvalidDocumentError",
    "IllegalStateError",
    "OversizedLineError",
    "tokenize",
    "remove_symbols",
    "Document",
    "build_document",
    "OccurrenceCursor",
    "open_cursor",
    "Corpus",
    "load_corpus",
]
