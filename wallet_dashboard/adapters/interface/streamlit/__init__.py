"""Streamlit interface."""
