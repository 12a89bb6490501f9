"""Code-point-level Unicode conversion between UTF-8, UTF-16, UTF-32, Latin-1, wide characters and the locale's encoding."""

__version__ = "0.1.0"

__all__ = ["utf_codec", "utf8", "utf16", "utf32"]