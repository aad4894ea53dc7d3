"""Page objects built on the Navigator capability."""

from e2e.pages.home import HomePage

__all__ = ["HomePage"]
