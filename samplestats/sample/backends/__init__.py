"""
Computational backends for sample statistics.
"""

from samplestats.sample.backends.cpu import CPUSampleBackend

__all__ = ["CPUSampleBackend"]
