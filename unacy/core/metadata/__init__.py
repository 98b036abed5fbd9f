"""Unit metadata storage."""

from unacy.core.metadata.metadata_store import MetadataStore

__all__ = ["MetadataStore"]
