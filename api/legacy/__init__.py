"""
Deprecated first version of the equipment endpoint.

Kept so that old clients keep working. It addresses rows with `?id=` instead
of a path segment, has no single-item GET and no timestamps, and it does not
report missing rows on update/delete. New clients should use `equipment/`.
"""
