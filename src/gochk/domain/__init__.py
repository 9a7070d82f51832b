"""Pure domain logic: import extraction, layer classification, value types.

Nothing in this package touches the filesystem directly; callers hand in
text streams and paths.
"""
