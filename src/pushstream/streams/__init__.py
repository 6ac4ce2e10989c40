"""Push-based reactive streams and their combinators."""

from pushstream.streams.stream import Stream
from pushstream.streams.emitter import Emitter, StreamEvent
from pushstream.streams.classifier import ClassifierMap
from pushstream.streams.operators import (
    StreamOperator,
    MapOperator,
    FilterOperator,
    FoldOperator,
    TakeOperator,
    TakeWhileOperator,
    DropOperator,
    DropWhileOperator,
    ExtremumOperator,
    PartitionOperator,
    ClassifyOperator,
    natural_compare,
)

__all__ = [
    "Stream",
    "Emitter",
    "StreamEvent",
    "ClassifierMap",
    "StreamOperator",
    "MapOperator",
    "FilterOperator",
    "FoldOperator",
    "TakeOperator",
    "TakeWhileOperator",
    "DropOperator",
    "DropWhileOperator",
    "ExtremumOperator",
    "PartitionOperator",
    "ClassifyOperator",
    "natural_compare",
]
