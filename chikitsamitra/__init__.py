"""
ChikitsaMitra health assistant service.

Hospital discovery, appointment booking, government scheme lookup,
FAQ search and a keyword-driven chatbot with speech I/O.
"""

__version__ = "1.0.0"
