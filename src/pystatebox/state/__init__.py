"""State/store layer.

The reducer computes new states, the registry tracks listeners and the
store commits updates and runs notification passes.
"""
