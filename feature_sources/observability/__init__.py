"""
Logging and metrics for feature-sources.
"""
