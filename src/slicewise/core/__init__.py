"""Slicing core for slicewise.

Contains the bounds engine, the UTF-8 codepoint guard, the view types and the
operations built on them. Everything here is pure: no I/O, no logging, no
shared state.

Dependency rule: do not import from `slicewise.entrypoints`.
"""
