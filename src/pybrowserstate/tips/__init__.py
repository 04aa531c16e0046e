"""Advisory tip selection.

The catalog defines the known tips once, the pool builder decides which
of them are candidates for the session, and the selector picks what to
surface from that pool.
"""
