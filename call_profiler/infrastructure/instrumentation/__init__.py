"""Runtime instrumentation of live objects."""

from .method_instrumenter import MethodInstrumenter

__all__ = ["MethodInstrumenter"]
