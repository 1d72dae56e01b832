import logging

from unfold import Unfold, pull
from variants import TERMINATED

logger = logging.getLogger(__name__)


class ConcatState(tuple):
    """Cursors of a concatenation: (first, second, pending).

    `first` is the live cursor over the first source until it runs dry.
    `pending` holds the second source until then; only at that point is it
    turned into the `second` cursor.
    """

    def __new__(cls, first, second=None, pending=None):
        return super().__new__(cls, (first, second, pending))

    @property
    def first(self):
        return self[0]

    @property
    def second(self):
        return self[1]

    @property
    def pending(self):
        return self[2]

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __repr__(self):
        return 'ConcatState(first={!r}, second={!r}, pending={!r})'.format(*self)


def next_of_concat(state):
    """transition of a concatenation: drain the first cursor, then the second"""
    if state.first is not None:
        item = pull(state.first)
        if item is not TERMINATED:
            return state, item
        logger.debug("first source exhausted, switching to %r", state.pending)
        state = ConcatState(None, iter(state.pending))

    return state, pull(state.second)


def concat(a, b):
    """Lazily produce all items of `a` followed by all items of `b`.

    Sources may be any iterables: lists, generators, other concatenations.
    Nothing is pulled from either source before the result is pulled, and
    `b` is not touched until `a` is exhausted.

    Every level of hand-nested concat(concat(...), ...) adds a few stack
    frames to each pull, so nesting depth is bounded by the recursion limit.
    Use chain() to join many sources at once.
    """
    return Unfold(ConcatState(iter(a), None, b), next_of_concat)


class ChainState(tuple):
    """Cursors of a chain: (current, remaining).

    `current` pulls from the source being drained, `remaining` iterates over
    the sources not yet started.
    """

    def __new__(cls, current, remaining):
        return super().__new__(cls, (current, remaining))

    @property
    def current(self):
        return self[0]

    @property
    def remaining(self):
        return self[1]

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))


def next_of_chain(state):
    """transition of a chain: drain the current cursor, then open the next source"""
    while True:
        if state.current is not None:
            item = pull(state.current)
            if item is not TERMINATED:
                return state, item
        source = next(state.remaining, TERMINATED)
        if source is TERMINATED:
            return state, TERMINATED
        logger.debug("switching to %r", source)
        state = ChainState(iter(source), state.remaining)


def chain(*sources):
    """Concatenate any number of sources from left to right.

    Yields the same items in the same order as concat(concat(a, b), c), but
    a pull stays flat however many sources there are. Each source is only
    turned into a cursor once the one before it is exhausted.
    """
    return Unfold(ChainState(None, iter(sources)), next_of_chain)
