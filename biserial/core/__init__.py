"""
biserial.core
=============

Shared building blocks: typed names, the error taxonomy, and logging setup.
"""
