"""Search engine for disjoint-letter word groups."""
