"""Boundary around the external strict TOON decoder.

The decoder capability is any callable that takes TOON text and returns the
decoded value, raising on malformed input. The default is
``toon_format.decode``, which decodes in strict mode unless told otherwise.
Everything it raises is converted into a tagged DecodeResult here, so no
decoder exception escapes into the validation run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from toon_format import decode as toon_decode

from toondocs.validator.errors import Diagnostic

logger = logging.getLogger(__name__)

Decoder = Callable[[str], Any]


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of a single strict decode attempt."""

    ok: bool
    value: Any = None
    message: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "DecodeResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, message: str) -> "DecodeResult":
        return cls(ok=False, message=message)


def default_decoder(content: str) -> Any:
    """Decode TOON text with the toon_format library (strict mode)."""
    return toon_decode(content)


def decode_strict(content: str, decoder: Optional[Decoder] = None) -> DecodeResult:
    """
    Run one strict decode of content. No retries.

    Args:
        content: TOON text
        decoder: Decoder capability (defaults to toon_format)

    Returns:
        DecodeResult.success with the value, or DecodeResult.failure with the
        decoder's error text
    """
    decode = decoder or default_decoder
    try:
        value = decode(content)
    except Exception as e:
        return DecodeResult.failure(str(e) or type(e).__name__)
    return DecodeResult.success(value)


def validate(content: str, source: str, decoder: Optional[Decoder] = None) -> Optional[Diagnostic]:
    """Return None if content decodes, otherwise a Diagnostic for source."""
    result = decode_strict(content, decoder)
    if result.ok:
        return None
    logger.debug("Decode failed for %s: %s", source, result.message)
    return Diagnostic(source, result.message)
