import sys
from lda_corpus.main import main

if __name__ == '__main__':
    main(sys.argv[1:])
