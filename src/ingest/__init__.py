"""Goal progress ingestion.

This module reads uploaded tabular files and normalizes their rows
into immutable goal records for the report layer.
"""
