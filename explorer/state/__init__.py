"""
Explorer application state.

Responsibilities:
- Hold one immutable revision of the filter state and favorites set.
- Apply user intents as pure state transitions.
- Recompute the visible attraction list and notify subscribers after changes.
"""
