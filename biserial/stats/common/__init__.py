"""
biserial.stats.common
=====================

Generic descriptive statistics used by the correlation routines.
"""
