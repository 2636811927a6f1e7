import sys
import time
from functools import wraps


def timed(func):
    """ Decorator @timed logs some timing info """
    @wraps(func)
    def wrapper(*arg, **kwargs):
        t1 = time.time()
        res = func(*arg, **kwargs)
        t2 = time.time()
        sys.stderr.write('TIMED %s took %0.3f ms\n' % (func.__name__, (t2-t1)*1000.0))
        return res
    return wrapper


def open_or_gz(f):
    if f.endswith('.gz'):
        import gzip
        return gzip.open(f, 'rt', encoding='utf-8')
    else:
        return open(f, encoding='utf-8')
