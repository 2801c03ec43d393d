"""
Maintenance utilities for the umbrella library.

- doc_audit: documentation and layout checks for topic modules
- reporting: surface and benchmark tables written as CSV plus metadata
"""
