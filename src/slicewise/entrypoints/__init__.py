"""Entry points for SLICEWISE.

Outer surfaces that drive the slicing core. Currently only the command-line
interface lives here.
"""
