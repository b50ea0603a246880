"""Parametric furniture generation engine.

Turns declarative furniture dimensions and functional modules into part
lists, hardware, priced bills of material, cut-list estimates, cost
summaries and assembly sequences.
"""

__version__ = "0.1.0"
