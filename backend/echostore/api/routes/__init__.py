"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines prefix-less APIRouters; create_app mounts them per prefix
    - Routes never contain business logic (delegate to core/)
"""
