"""
auteur - Director style matching and blending engine.

Represents directorial visual styles as fixed-axis vectors, ranks a
screenplay's style against a catalog of director profiles, blends two
profiles into a synthetic style, classifies positions into quadrants and
emotional tiers, and drives the pan/zoom math of the style constellation map.
"""

__version__ = "0.1.0"
