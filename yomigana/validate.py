from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from yomigana import (
    DEFAULT_DELIMITER_END,
    DEFAULT_DELIMITER_START,
    DEFAULT_MODE,
    DEFAULT_ROMAJI_SYSTEM,
    DEFAULT_TARGET,
)
from yomigana.nlp.base import ConfigurationError


class To(str, Enum):
    """Target script of the conversion."""
    hiragana = "hiragana"
    katakana = "katakana"
    romaji = "romaji"


class Mode(str, Enum):
    """Presentation of the result."""
    normal = "normal"
    spaced = "spaced"
    okurigana = "okurigana"
    furigana = "furigana"


class RomajiSystem(str, Enum):
    hepburn = "hepburn"
    nippon = "nippon"
    passport = "passport"


_SELECTORS = {"to": To, "mode": Mode, "system": RomajiSystem}


class ConversionRequest(BaseModel):
    text:            str
    to:              To           = Field(default_factory=lambda: DEFAULT_TARGET)
    mode:            Mode         = Field(default_factory=lambda: DEFAULT_MODE)
    system:          RomajiSystem = Field(default_factory=lambda: DEFAULT_ROMAJI_SYSTEM)
    delimiter_start: str          = DEFAULT_DELIMITER_START
    delimiter_end:   str          = DEFAULT_DELIMITER_END
    model_config = ConfigDict(extra="forbid", validate_default=True)

    @field_validator("to", "mode", "system", mode="before")
    @classmethod
    def _normalise_selector(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, Enum):
            return value.strip().lower()
        return value

    @classmethod
    def build(cls, **kwargs: Any) -> "ConversionRequest":
        """Validate *kwargs* and return a request, dropping ``None`` values so
        the configured defaults apply.

        Raises ConfigurationError instead of pydantic's ValidationError so
        callers only deal with one exception type at the boundary.
        """
        data: Dict[str, Any] = {k: v for k, v in kwargs.items() if v is not None}
        try:
            return cls(**data)
        except ValidationError as e:
            error = e.errors()[0]
            option = str(error["loc"][0]) if error["loc"] else "request"
            value = data.get(option, error.get("input"))
            allowed = [m.value for m in _SELECTORS[option]] if option in _SELECTORS else None
            raise ConfigurationError(option, value, error["msg"], allowed) from e
