"""Core building blocks: reference parsing, cross-reference stores, layout."""
