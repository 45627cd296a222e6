"""
PregnancyReports
Clinical report extraction and classification for pregnancy tracking
"""

__version__ = "1.0.0"
