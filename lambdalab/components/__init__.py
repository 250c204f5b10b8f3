"""
Atomic components.

Each component keeps pure logic in ``_impl``, DTOs in ``models``, I/O
interfaces in ``ports`` and entry points (``run_*``) in ``component``.
"""
