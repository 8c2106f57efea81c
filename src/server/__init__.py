"""
HTTP server for meeting transcript summarization and e-mail delivery.
"""

__version__ = "1.0.0"
