"""Public API surface for piranhito.processing."""
__all__ = [
    "blank_collapser",
    "block_stripper",
    "line_ops",
    "markers",
    "pipeline_registry",
    "pipelines",
    "reformatter",
    "substitution",
]
