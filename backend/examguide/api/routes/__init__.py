"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain store logic (delegate to services/)
    - Data routes take the store through Depends(get_store), so an unready store is a 503
"""
