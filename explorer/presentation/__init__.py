"""
Row presentation helpers.

Responsibilities:
- Turn raw attraction ratings into clamped, star-based display values.
- Map the favorites-only flag onto the indicator icon a client draws.
- Bundle per-row display values for the attraction list.
"""
