"""dirlist package: list directory contents as a grid or an aligned table.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__version__ = "0.3.0"

__all__: list[str] = []
