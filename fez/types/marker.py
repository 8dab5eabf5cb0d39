from __future__ import annotations


class EmptySequenceMarker:
    """Result of evaluating `(begin)`.

    Kept apart from NIL and FALSE: an empty body has no value, which is not
    the same thing as the empty list or false.
    """

    __slots__ = ()

    def __repr__(self):
        return "#<empty-begin>"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


EMPTY_BEGIN = EmptySequenceMarker()
