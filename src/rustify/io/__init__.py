"""Decoding helpers returning Result instead of raising."""

from .codec import EMPTY_BODY, NOT_STRUCTURED, decode, decode_model, decode_structured

__all__ = ["decode", "decode_structured", "decode_model", "EMPTY_BODY", "NOT_STRUCTURED"]
