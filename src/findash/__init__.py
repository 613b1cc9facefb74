"""Finance dashboard: summary backend, API client and Streamlit view."""

__version__ = "0.1.0"
