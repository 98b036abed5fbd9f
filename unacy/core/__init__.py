"""Core components: graph, cache, metadata, registry and formats."""
