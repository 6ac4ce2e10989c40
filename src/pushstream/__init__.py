"""
pushstream: single-producer, multi-subscriber reactive streams.

Values pushed into a stream are delivered synchronously, depth first, through
every stream derived from it with ``map``, ``filter``, ``fold``, ``take``,
``drop``, ``max``, ``min``, ``merge``, ``partition`` and ``classify``.
"""

from pushstream.config import StreamConfig, EndPolicy, KeyCoercion
from pushstream.streams import Stream, StreamEvent, ClassifierMap

__version__ = "0.1.0"
__author__ = "pushstream Contributors"
__license__ = "Apache-2.0"

__all__ = [
    "StreamConfig",
    "EndPolicy",
    "KeyCoercion",
    "Stream",
    "StreamEvent",
    "ClassifierMap",
]

# Configure default settings
StreamConfig.set_defaults()
