"""Report layout and rendering.

This module computes goal progress, lays out report pages, and
renders the finished document to PDF.
"""
