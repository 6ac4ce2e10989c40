"""
Configuration management for stream dispatch.
"""

from typing import ClassVar, Optional
from dataclasses import dataclass
from enum import Enum


class EndPolicy(Enum):
    """What a repeated call to ``Stream.end()`` does."""
    ONCE = "once"      # end listeners fire on the first call only
    REPEAT = "repeat"  # every call re-notifies end listeners


class KeyCoercion(Enum):
    """How classification keys are normalized before lookup."""
    NONE = "none"
    STR = "str"
    
    def apply(self, key):
        """Normalize a classification key."""
        if self is KeyCoercion.STR:
            return str(key)
        return key


@dataclass
class StreamConfig:
    """Global configuration for stream operations."""
    
    # Lifecycle
    end_policy: EndPolicy = EndPolicy.ONCE
    
    # Classification
    key_coercion: KeyCoercion = KeyCoercion.NONE
    
    # Diagnostics
    log_dispatch: bool = False
    
    _instance: ClassVar[Optional['StreamConfig']] = None
    
    def __post_init__(self):
        """Accept enum values given as plain strings."""
        self.end_policy = EndPolicy(self.end_policy)
        self.key_coercion = KeyCoercion(self.key_coercion)
    
    @classmethod
    def get_instance(cls) -> 'StreamConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if key == "end_policy":
                value = EndPolicy(value)
            elif key == "key_coercion":
                value = KeyCoercion(value)
            if hasattr(instance, key):
                setattr(instance, key, value)
    
    @classmethod
    def reset(cls) -> None:
        """Restore every option to its default."""
        instance = cls.get_instance()
        defaults = cls()
        instance.end_policy = defaults.end_policy
        instance.key_coercion = defaults.key_coercion
        instance.log_dispatch = defaults.log_dispatch


# Global configuration instance
config = StreamConfig.get_instance()
