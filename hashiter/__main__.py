import sys

from hashiter.bootstrap.main import entrypoint


if __name__ == '__main__':
    sys.exit(entrypoint())
