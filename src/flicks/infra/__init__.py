"""
Infrastructure layer - errors, logging, settings, and technical concerns.

Nothing in here knows about frame rates; the time unit itself lives in
``flicks.duration`` and its derivation in ``flicks.solver``.
"""
