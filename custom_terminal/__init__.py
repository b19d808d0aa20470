"""custom_terminal package: a small file-manipulation shell with a Qt window and a console front-end.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
