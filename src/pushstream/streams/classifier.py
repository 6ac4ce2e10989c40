"""Lazily populated key -> child stream registry returned by ``Stream.classify``."""

import logging
from typing import TYPE_CHECKING, Dict, Hashable, ItemsView, Iterator, KeysView, Optional

from pushstream.config import config, KeyCoercion

if TYPE_CHECKING:
    from pushstream.streams.stream import Stream

logger = logging.getLogger(__name__)


class ClassifierMap:
    """
    Children of one parent stream, keyed by classification result.
    
    A child exists only once ``get`` has been called for its key, which
    ``classify`` does when the first value with that key arrives. Entries
    are never removed. The key coercion is fixed when the map is built.
    """
    
    def __init__(self, parent: 'Stream',
                 key_coercion: Optional[KeyCoercion] = None):
        self._parent = parent
        self._key_coercion = KeyCoercion(
            key_coercion if key_coercion is not None else config.key_coercion
        )
        self._streams: Dict[Hashable, 'Stream'] = {}
    
    @property
    def parent(self) -> 'Stream':
        return self._parent
    
    def get(self, key: Hashable) -> 'Stream':
        """Return the child for ``key``, creating it on first use."""
        key = self._normalize(key)
        stream = self._streams.get(key)
        if stream is None:
            stream = self._parent._spawn(self._parent)
            self._streams[key] = stream
            logger.debug(f"Created classifier child for key {key!r}")
        return stream
    
    def keys(self) -> KeysView:
        return self._streams.keys()
    
    def items(self) -> ItemsView:
        return self._streams.items()
    
    def _normalize(self, key):
        key = self._key_coercion.apply(key)
        try:
            hash(key)
        except TypeError:
            raise TypeError(
                f"Classification key must be hashable, got {type(key).__name__}"
            ) from None
        return key
    
    def __contains__(self, key) -> bool:
        try:
            return self._normalize(key) in self._streams
        except TypeError:
            return False
    
    def __len__(self) -> int:
        return len(self._streams)
    
    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._streams)
    
    def __repr__(self) -> str:
        return f"ClassifierMap(keys={list(self._streams)!r})"
