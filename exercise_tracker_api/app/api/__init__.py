"""
HTTP layer.

``router`` aggregates the domain routers defined in ``endpoints``.
"""
