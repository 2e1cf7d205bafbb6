from .agents.orchestrator import generate

__all__ = [
    "generate",
]
