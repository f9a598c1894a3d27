"""
romdedup - Duplicate ROM resolver for ES-DE gamelists

Cross-references a ROM directory against a gamelist.xml file, finds ROMs
that share a canonical game name, and lets the operator pick which copy to
keep while the rest are moved to a quarantine directory.
"""

__version__ = "1.0.0"
__author__ = "Pete Wright"
