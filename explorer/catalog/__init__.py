"""
Attraction catalog package.

Responsibilities:
- Load the seed attraction catalog shipped with the package.
- Validate rows into immutable Attraction records.
- Filter the catalog down to the attractions visible for a filter state.
"""
