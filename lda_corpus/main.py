import sys
import random
from argparse import ArgumentParser
from functools import partial

from lda_corpus.corpus import load_corpus, MIN_LINE_LENGTH, MAX_LINE_LENGTH
from lda_corpus.utils import timed


class CorpusShard:
    """
    Owns one disjoint shard of the document file. Every document in the
    shard is walked only by this object's cursors.
    """
    def __init__(self, options):
        self.topics = options.topics
        self.options = options
        self.core_id = getattr(options, 'core_id', 0)
        self.corpus = None

    @timed
    def load_initial_docs(self):
        sys.stderr.write('Loading document shard %d / %d...\n' % (self.options.this_shard, self.options.shards))
        self.corpus = load_corpus(self.options.document, self.topics,
                                  min_line_length=self.options.min_line_length,
                                  max_line_length=self.options.max_line_length,
                                  shards=self.options.shards,
                                  this_shard=self.options.this_shard)
        if len(self.corpus) == 0:
            sys.stderr.write('WARNING: shard %d has no documents\n' % self.options.this_shard)
        return self

    def initialize_topics(self, seed=None):
        """
        Give every occurrence a uniformly random topic, the usual starting
        state for a Gibbs sampler.
        """
        rng = random.Random(seed)
        for d in self.corpus:
            with d.cursor() as cur:
                while not cur.is_done():
                    cur.set_topic(rng.randrange(self.topics))
                    cur.advance()
        return self

    def topic_totals(self):
        totals = [0] * self.topics
        for d in self.corpus:
            for z, c in enumerate(d.topic_histogram):
                totals[z] += c
        return totals

    def report(self):
        sys.stderr.write('|| DONE core=%d shard=%d docs=%d occurrences=%d\n' % (
            self.core_id, self.options.this_shard, len(self.corpus), self.corpus.num_occurrences()))
        for z, c in enumerate(self.topic_totals()):
            sys.stderr.write('[TOPIC %d] :: %d\n' % (z, c))
        return self


def build_parser():
    parser = ArgumentParser()
    parser.add_argument("--cores", type=int, default=1, help="Number of cores to use")

    parser.add_argument("--topics", type=int, default=100, help="Number of topics to use")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the initial topic assignment")

    parser.add_argument("--document", type=str, required=True, help="File to load as documents, one per line")
    parser.add_argument("--min_line_length", type=int, default=MIN_LINE_LENGTH, help="Skip lines shorter than this")
    parser.add_argument("--max_line_length", type=int, default=MAX_LINE_LENGTH, help="Fail on lines longer than this")

    parser.add_argument("--shards", type=int, default=1, help="Shard the document file into this many")
    parser.add_argument("--this_shard", type=int, default=0, help="What shard number am I")
    return parser


def run_local_shard(options, core_id):
    # Each core takes a sub-shard of this process's shard
    options.this_shard = options.this_shard * options.cores + core_id
    options.core_id = core_id
    seed = None if options.seed is None else options.seed + core_id
    sys.stderr.write('initialize core %d on shard %d\n' % (core_id, options.this_shard))
    shard = CorpusShard(options).load_initial_docs().initialize_topics(seed).report()
    return shard.topic_totals()


def main(argv=None):
    from multiprocessing import Pool

    options = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    sys.stderr.write('Running on %d cores\n' % options.cores)

    options.shards = options.cores * options.shards  # split up even more

    if options.cores > 1:
        with Pool(options.cores) as p:
            return p.map(partial(run_local_shard, options), range(options.cores))
    return [run_local_shard(options, 0)]
