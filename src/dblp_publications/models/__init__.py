"""Data models for dblp-publications."""

from dblp_publications.models.publication import Publication, PublicationType

__all__ = ["Publication", "PublicationType"]
