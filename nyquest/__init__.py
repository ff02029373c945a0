"""HTTP client facade over a registered backend, with blocking and asyncio interfaces."""

__version__ = "0.1.1"