"""
Content app package for the Web3 Economy platform backend.

Provides the learning-resource hub: tutorials, documentation, tools and
videos, each addressable by id or by a unique slug, with a public
download counter.
"""
