from .base import ThemeBackend
from .ghostty import GhosttyBackend
from .zellij import ZellijBackend

BACKENDS = {
    GhosttyBackend.name: GhosttyBackend,
    ZellijBackend.name: ZellijBackend,
}


def get_backend(name):
    """Instantiate a backend by name."""
    try:
        return BACKENDS[name]()
    except KeyError:
        raise ValueError(
            f"unknown theme backend {name!r} (choose from {', '.join(sorted(BACKENDS))})"
        ) from None


__all__ = ["BACKENDS", "GhosttyBackend", "ThemeBackend", "ZellijBackend", "get_backend"]
