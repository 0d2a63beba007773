from .chain import Chain, Invoke, Next, build_chain

__all__ = (
    "Chain",
    "Invoke",
    "Next",
    "build_chain",
)
