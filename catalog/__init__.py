"""Core (UI-agnostic) department catalog logic.

This package contains:
- the LogoSource tagged union and its JSON codec
- the Department record and decoder
- the static description table and name-key normalization
- data loading (generated mock list or JSON file -> Department list)
- load state for the presentation layer
- formatting and chart helpers (Altair -> Vega-Lite spec dict)
"""
