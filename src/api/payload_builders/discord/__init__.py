"""Payload builders do canal Discord."""

from .embed import build_embed_payload

__all__ = ["build_embed_payload"]
