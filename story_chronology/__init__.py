"""Story Chronology - fictional-calendar temporal engine for story catalogs.

Named eras, era-anchored dates, era-aware timeline ordering and cross-era
character ages.
"""

__version__ = "1.0.0"
