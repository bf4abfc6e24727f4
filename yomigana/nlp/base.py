from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class ConfigurationError(ValueError):
    """Raised when a conversion option or factory argument is not supported."""
    def __init__(self, option: str, value: object, reason: str,
                 allowed: Optional[Sequence[str]] = None):
        message = f"Invalid value {value!r} for '{option}': {reason}"
        if allowed:
            message += f" (expected one of: {', '.join(allowed)})"
        super().__init__(message)
        self.option = option
        self.value = value
        self.reason = reason
        self.allowed = list(allowed) if allowed else []


@dataclass
class Node:
    """One analyzer token: surface text, katakana reading and normalized POS."""
    surface: str
    reading: str
    part_of_speech: str = "other"


class BaseTokenizer(ABC):
    """Abstract base class for the morphological analyzer collaborator"""

    @abstractmethod
    def tokenize(self, text: str) -> List[Node]:
        """Tokenize text into analyzer nodes, in document order"""
        pass

    def close(self) -> None:
        """Release the analyzer model. Default implementation holds nothing."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
