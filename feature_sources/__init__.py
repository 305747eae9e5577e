"""
feature-sources: data source descriptors for feature ingestion.

Converts data source definitions between the variant-tagged wire message
and the flat storage row, with equality defined over the wire form.
"""

__version__ = "0.1.0"
