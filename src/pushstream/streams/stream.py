"""
Push-based reactive streams.
"""

import logging
from typing import (
    Any, Callable, Dict, Generic, Hashable, Iterable, Optional, Tuple,
    TypeVar, Union
)

from pushstream.config import config, EndPolicy, KeyCoercion
from pushstream.streams.classifier import ClassifierMap
from pushstream.streams.emitter import Emitter, StreamEvent
from pushstream.streams.operators import (
    StreamOperator, MapOperator, FilterOperator, FoldOperator,
    TakeOperator, TakeWhileOperator, DropOperator, DropWhileOperator,
    ExtremumOperator, PartitionOperator, ClassifyOperator,
    natural_compare, as_callable, _MISSING
)

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


class Stream(Generic[T]):
    """
    A node that receives values one at a time and hands each one to its
    listeners before ``push`` returns.
    
    Combinators derive new streams by listening on this one. Derived streams
    are built with ``type(self)``, so subclasses survive composition. Ending a
    stream stops its own pushes only; derived streams are not ended.
    """
    
    def __init__(self, initial: Any = None,
                 upstreams: Optional[Iterable['Stream']] = None,
                 *, end_policy: Optional[EndPolicy] = None,
                 log_dispatch: Optional[bool] = None):
        """
        Initialize stream.
        
        Args:
            initial: Unused by the base class; available to subclasses
            upstreams: Streams this one was derived from. Stored, never acted on.
            end_policy: Repeated end() behaviour (default: config.end_policy)
            log_dispatch: Log each delivered value (default: config.log_dispatch)
        
        Settings are fixed at construction; later config changes do not
        affect existing streams. Derived streams inherit them from their source.
        """
        self._end_policy = EndPolicy(end_policy if end_policy is not None else config.end_policy)
        self._log_dispatch = bool(config.log_dispatch if log_dispatch is None else log_dispatch)
        self._ended = False
        self._emitters: Dict[StreamEvent, Emitter] = {
            event: Emitter() for event in StreamEvent
        }
        self.upstreams: Tuple['Stream', ...] = tuple(upstreams or ())
    
    @property
    def ended(self) -> bool:
        return self._ended
    
    # Lifecycle
    
    def push(self, value: T) -> None:
        """Deliver ``value`` to every data listener. No-op once ended."""
        if self._ended:
            logger.debug(f"Ignoring push to ended {self!r}")
            return
        
        if self._log_dispatch:
            logger.debug(f"{self!r} dispatching {value!r}")
        
        self._emitters[StreamEvent.DATA].emit(value)
    
    def end(self) -> None:
        """Stop accepting values and notify end listeners."""
        if self._ended and self._end_policy == EndPolicy.ONCE:
            logger.debug(f"Ignoring repeated end of {self!r}")
            return
        
        self._ended = True
        logger.debug(f"Ended {self!r}")
        self._emitters[StreamEvent.END].emit()
    
    # Subscription
    
    def on(self, event: Union[StreamEvent, str], callback: Any,
           context: Any = None) -> None:
        """Register a listener for ``event`` ("data" or "end")."""
        if isinstance(event, str):
            event = StreamEvent(event)
        elif not isinstance(event, StreamEvent):
            raise TypeError(f"Unknown event type: {type(event).__name__}")
        
        self._emitters[event].add(as_callable(callback, context))
    
    def listen(self, callback: Any, context: Any = None) -> None:
        """Register a data listener."""
        self.on(StreamEvent.DATA, callback, context)
    
    def on_end(self, callback: Any, context: Any = None) -> None:
        """Register an end listener."""
        self.on(StreamEvent.END, callback, context)
    
    def listener_count(self, event: Union[StreamEvent, str] = StreamEvent.DATA) -> int:
        return len(self._emitters[StreamEvent(event)])
    
    # Transformation combinators
    
    def map(self, func: Callable[[T], U], context: Any = None) -> 'Stream[U]':
        """Push ``func(value)`` for each value."""
        return self._derive(MapOperator(as_callable(func, context)))
    
    def filter(self, predicate: Callable[[T], bool],
               context: Any = None) -> 'Stream[T]':
        """Keep only values matching predicate."""
        return self._derive(FilterOperator(as_callable(predicate, context)))
    
    def fold(self, reducer: Callable[[U, T], U], seed: Any = _MISSING) -> 'Stream[U]':
        """
        Push the running accumulation of values.
        
        Without ``seed`` the first value is pushed as is and becomes the
        accumulator; the reducer applies from the second value on.
        """
        return self._derive(FoldOperator(as_callable(reducer), seed))
    
    reduce = fold
    
    def take(self, n: int) -> 'Stream[T]':
        """Forward the first n values."""
        return self._derive(TakeOperator(n))
    
    def take_while(self, predicate: Callable[[T], bool],
                   context: Any = None) -> 'Stream[T]':
        """Forward values until the first one failing predicate."""
        return self._derive(TakeWhileOperator(as_callable(predicate, context)))
    
    takeWhile = take_while
    
    def drop(self, n: int) -> 'Stream[T]':
        """Skip the first n values."""
        return self._derive(DropOperator(n))
    
    def drop_while(self, predicate: Callable[[T], bool],
                   context: Any = None) -> 'Stream[T]':
        """Skip values until the first one failing predicate, then forward everything."""
        return self._derive(DropWhileOperator(as_callable(predicate, context)))
    
    dropWhile = drop_while
    
    def max(self, comparator: Optional[Callable[[T, T], int]] = None,
            context: Any = None) -> 'Stream[T]':
        """Push each new running maximum."""
        return self._derive(ExtremumOperator(self._comparator(comparator, context), 1))
    
    def min(self, comparator: Optional[Callable[[T, T], int]] = None,
            context: Any = None) -> 'Stream[T]':
        """Push each new running minimum."""
        return self._derive(ExtremumOperator(self._comparator(comparator, context), -1))
    
    # Combining and splitting
    
    def merge(self, other: 'Stream[U]') -> 'Stream[Union[T, U]]':
        """Forward values from this stream and ``other`` in arrival order."""
        if not isinstance(other, Stream):
            raise TypeError(f"Can only merge with a Stream, got {type(other).__name__}")
        
        stream = self._spawn(self, other)
        self.listen(stream.push)
        other.listen(stream.push)
        return stream
    
    def partition(self, predicate: Callable[[T], bool],
                  context: Any = None) -> Tuple['Stream[T]', 'Stream[T]']:
        """Split into (values matching predicate, values not matching)."""
        matched, unmatched = self._spawn(self), self._spawn(self)
        operator = PartitionOperator(as_callable(predicate, context))
        
        def route(value):
            for is_match, item in operator.apply(value):
                (matched if is_match else unmatched).push(item)
        
        self.listen(route)
        return matched, unmatched
    
    fork = partition
    
    def classify(self, key_func: Callable[[T], Hashable], context: Any = None,
                 key_coercion: Optional[KeyCoercion] = None) -> ClassifierMap:
        """Route each value to a child stream chosen by ``key_func(value)``."""
        streams = ClassifierMap(self, key_coercion)
        operator = ClassifyOperator(as_callable(key_func, context))
        
        def route(value):
            for key, item in operator.apply(value):
                streams.get(key).push(item)
        
        self.listen(route)
        return streams
    
    # Internals
    
    def _spawn(self, *upstreams: 'Stream') -> 'Stream':
        stream = type(self)(None, upstreams)
        stream._end_policy = self._end_policy
        stream._log_dispatch = self._log_dispatch
        return stream
    
    def _derive(self, operator: StreamOperator) -> 'Stream':
        stream = self._spawn(self)
        
        def forward(value):
            for item in operator.apply(value):
                stream.push(item)
        
        self.listen(forward)
        return stream
    
    @staticmethod
    def _comparator(comparator, context) -> Callable[[Any, Any], int]:
        if comparator is None:
            return natural_compare
        return as_callable(comparator, context)
    
    def __repr__(self) -> str:
        return (f"{type(self).__name__}(ended={self._ended}, "
                f"listeners={len(self._emitters[StreamEvent.DATA])})")
