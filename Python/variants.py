from copy import deepcopy


class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class Terminated(Singleton):
    """Marker returned by a pull when a sequence has no more items"""

    @staticmethod
    def __bool__():
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memodict={}):
        return self

    def __repr__(self):
        return 'TERMINATED'


TERMINATED = Terminated()


class Done(Singleton):
    """State of a computation that has nothing left to do"""

    @staticmethod
    def is_done():
        return True

    @property
    def value(self):
        raise ValueError("a finished state holds no value")

    def __deepcopy__(self, memodict={}):
        return self

    def __repr__(self):
        return 'Done()'


class Active(tuple):
    """State of a computation that still has work to do.

    Holds exactly one value and is immutable, so an active state can never
    be confused with a finished one.
    """

    def __new__(cls, value):
        return super().__new__(cls, (value,))

    @staticmethod
    def is_done():
        return False

    @property
    def value(self):
        return self[0]

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __deepcopy__(self, memodict={}):
        return Active(deepcopy(self.value, memo=memodict))

    def __repr__(self):
        return 'Active({!r})'.format(self.value)
