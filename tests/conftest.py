import numbers

import pytest


class TopicCount:
    """ A non-int Integral, like numpy.int64 """
    def __init__(self, n):
        self.n = n

    def __int__(self):
        return self.n

    def __index__(self):
        return self.n

    def __lt__(self, other):
        return self.n < other


numbers.Integral.register(TopicCount)


@pytest.fixture
def topic_count():
    return TopicCount
