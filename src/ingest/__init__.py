"""Feed ingestion pipeline.

This package reads the three raw feeds, tokenizes their rows and
coordinates decoding and aggregation into one dashboard result.
"""
