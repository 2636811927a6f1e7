class LDACorpusError(Exception):
    pass


class InvalidArgumentError(LDACorpusError, ValueError):
    """ A caller-supplied parameter is out of range (num_topics, topic label) """
    pass


class InvalidInputError(LDACorpusError, ValueError):
    """ A text record cannot make a valid document """
    pass


class MalformedLineError(InvalidInputError):
    def __init__(self, line_no, line, reason):
        self.line_no = line_no
        self.line = line
        InvalidInputError.__init__(self, 'Cannot create document from line %d [%s] due to %s' % (line_no, line, reason))


class InvalidDocumentError(LDACorpusError):
    pass


class IllegalStateError(LDACorpusError, RuntimeError):
    pass


class OversizedLineError(LDACorpusError, IOError):
    def __init__(self, line_no, max_length):
        self.line_no = line_no
        self.max_length = max_length
        IOError.__init__(self, 'Encountered a long line: line %d exceeds %d characters' % (line_no, max_length))
