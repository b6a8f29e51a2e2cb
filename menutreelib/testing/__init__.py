"""Testing utilities for MenuTreeLib consumers."""

from .fixtures import build_sample_menu, build_full_menu, build_deep_chain, IteratorProbe

__all__ = [
    'build_sample_menu',
    'build_full_menu',
    'build_deep_chain',
    'IteratorProbe',
]
