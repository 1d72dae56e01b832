"""
An unfold turns a state and a transition function into a lazy sequence.

The transition function receives the current state and returns the next
state together with the next item:

    transition(state) -> (next_state, item)

It ends the sequence by returning TERMINATED as the item (or on its own).
Once that happens the sequence stays ended: the transition function is never
called again and the last state is dropped.

Every Unfold is an ordinary Python iterator, so it can be consumed with a
for-loop, list(), itertools, or passed to concat() as a source.
"""

import logging
from functools import reduce
from itertools import islice

from variants import TERMINATED

logger = logging.getLogger(__name__)


class Unfold:
    """Lazy, single-pass sequence produced by repeatedly applying a
    transition function to a privately held state."""

    def __init__(self, state, transition):
        if not callable(transition):
            raise TypeError("transition must be callable, got {}".format(type(transition).__name__))
        self._state = state
        self._transition = transition
        self._produced = 0

    @property
    def terminated(self):
        return self._transition is None

    @property
    def produced(self):
        """number of items pulled so far"""
        return self._produced

    def pull(self):
        """Return the next item, or TERMINATED if there is none."""
        if self._transition is None:
            return TERMINATED

        result = self._transition(self._state)
        if result is TERMINATED:
            item = TERMINATED
        else:
            state, item = result

        if item is TERMINATED:
            self._terminate()
            return TERMINATED

        self._state = state
        self._produced += 1
        return item

    def _terminate(self):
        logger.debug("%r terminated after %d items", self, self._produced)
        self._state = None
        self._transition = None

    def __iter__(self):
        return self

    def __next__(self):
        item = self.pull()
        if item is TERMINATED:
            raise StopIteration()
        return item

    def __repr__(self):
        if self._transition is None:
            return 'Unfold(<terminated>)'
        name = getattr(self._transition, '__name__', type(self._transition).__name__)
        return 'Unfold({})'.format(name)


class StateBox:
    """Mutable holder for the state of an in-place step function."""

    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return 'StateBox({!r})'.format(self.value)


def sequence(state, step):
    """Build an Unfold from a step function that updates its state in place.

    `step` is called with a StateBox; it may rebind `box.value` and returns
    the next item or TERMINATED. Every call gets a fresh box, so no box
    outlives the pull that created it.
    """
    if not callable(step):
        raise TypeError("step must be callable, got {}".format(type(step).__name__))

    def transition(current):
        box = StateBox(current)
        item = step(box)
        return box.value, item

    transition.__name__ = getattr(step, '__name__', 'transition')
    return Unfold(state, transition)


def pull(cursor):
    """Pull one item from an Unfold or any other iterator."""
    if isinstance(cursor, Unfold):
        return cursor.pull()
    return next(cursor, TERMINATED)


def collect(source):
    """all remaining items, in order"""
    return list(source)


def fold(function, initial, source):
    """combine all remaining items from left to right, starting with initial"""
    return reduce(function, source, initial)


def take(n, source):
    """lazily yield at most n items"""
    if n < 0:
        raise ValueError("cannot take a negative number of items: {}".format(n))
    return islice(source, n)
