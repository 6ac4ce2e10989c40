"""
Stream operators for push-based transformation.

Each operator holds the running state of one combinator. ``apply`` is called
once per upstream value and yields whatever the derived stream should receive
for it (nothing, one value, or a routed pair for the splitting operators).
"""

import types
from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, Iterator, Tuple, TypeVar

T = TypeVar('T')
U = TypeVar('U')

_MISSING = object()


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using ``<`` and ``>``."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def as_callable(listener: Any, context: Any = None) -> Callable[..., Any]:
    """
    Normalize a listener argument into a callable.
    
    A callable is bound to ``context`` when one is given, so ``context``
    arrives as its first argument. Any other value becomes a function that
    ignores its arguments and returns that value.
    """
    if callable(listener):
        if context is not None:
            return types.MethodType(listener, context)
        return listener
    
    def constant(*args, **kwargs):
        return listener
    return constant


def _check_count(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Count must be an integer, got {type(n).__name__}")
    return n


class StreamOperator(ABC):
    """Base class for stream operators."""
    
    @abstractmethod
    def apply(self, value: T) -> Iterator[Any]:
        """Process one upstream value."""
        pass


class MapOperator(StreamOperator):
    """Map each element to a new value."""
    
    def __init__(self, func: Callable[[T], U]):
        self.func = func
    
    def apply(self, value: T) -> Iterator[U]:
        yield self.func(value)


class FilterOperator(StreamOperator):
    """Filter elements by predicate."""
    
    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate
    
    def apply(self, value: T) -> Iterator[T]:
        if self.predicate(value):
            yield value


class FoldOperator(StreamOperator):
    """
    Running accumulation.
    
    Without a seed the first element becomes the accumulator unchanged;
    every element after that replaces it with ``reducer(acc, value)``.
    """
    
    def __init__(self, reducer: Callable[[U, T], U], seed: Any = _MISSING):
        self.reducer = reducer
        self.acc = seed
    
    def apply(self, value: T) -> Iterator[U]:
        if self.acc is _MISSING:
            self.acc = value
        else:
            self.acc = self.reducer(self.acc, value)
        yield self.acc


class TakeOperator(StreamOperator):
    """Take first n elements."""
    
    def __init__(self, n: int):
        self.remaining = _check_count(n)
    
    def apply(self, value: T) -> Iterator[T]:
        if self.remaining > 0:
            self.remaining -= 1
            yield value


class TakeWhileOperator(StreamOperator):
    """Take elements while predicate is true. Never resumes once it fails."""
    
    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate
        self.active = True
    
    def apply(self, value: T) -> Iterator[T]:
        self.active = self.active and bool(self.predicate(value))
        if self.active:
            yield value


class DropOperator(StreamOperator):
    """Skip first n elements."""
    
    def __init__(self, n: int):
        self.remaining = _check_count(n)
    
    def apply(self, value: T) -> Iterator[T]:
        if self.remaining > 0:
            self.remaining -= 1
        else:
            yield value


class DropWhileOperator(StreamOperator):
    """Drop elements while predicate is true. Never drops again once it fails."""
    
    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate
        self.active = False
    
    def apply(self, value: T) -> Iterator[T]:
        self.active = self.active or not self.predicate(value)
        if self.active:
            yield value


class ExtremumOperator(StreamOperator):
    """
    Running extremum under a three-way comparator.
    
    ``direction`` is 1 for a maximum and -1 for a minimum. A value replaces
    the current extremum only when it compares strictly beyond it, so ties
    are not re-emitted.
    """
    
    def __init__(self, comparator: Callable[[T, T], int], direction: int):
        self.comparator = comparator
        self.direction = direction
        self.current = _MISSING
    
    def apply(self, value: T) -> Iterator[T]:
        if (self.current is _MISSING
                or self.comparator(value, self.current) * self.direction > 0):
            self.current = value
            yield value


class PartitionOperator(StreamOperator):
    """Route each element to the true or false branch."""
    
    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate
    
    def apply(self, value: T) -> Iterator[Tuple[bool, T]]:
        yield bool(self.predicate(value)), value


class ClassifyOperator(StreamOperator):
    """Pair each element with its classification key."""
    
    def __init__(self, key_func: Callable[[T], Hashable]):
        self.key_func = key_func

    def apply(self, value: T) -> Iterator[Tuple[Hashable, T]]:
        yield self.key_func(value), value
