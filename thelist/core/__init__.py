"""
Core utilities shared across The List.

This package hosts configuration helpers, the exception hierarchy and the
logging setup. Storage and HTTP layers depend on these primitives instead of
reading os.environ or configuring handlers themselves.
"""
