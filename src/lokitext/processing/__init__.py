"""Public API surface for lokitext.processing."""
__all__ = [
    "basic",
    "casing",
    "text_ops",
    "transform",
]
