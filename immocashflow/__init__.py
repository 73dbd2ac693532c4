"""
immocashflow - Rental investment calculator

Financial engine for French buy-to-let investments: notary fees, loan
amortization, subsidized loans, taxation regimes, scoring and comparison.

Modules:
    - core: Settings, logging and exceptions
    - domain: Pydantic data models and the calculation engine
    - application: Aggregation, projection and the simulation store
    - services: Location lookup, market estimates and listing import
    - ui: Streamlit pages and UI components
"""

__version__ = "0.1.0"
