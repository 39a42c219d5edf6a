"""Streamlit UI: page framework, shared components and page implementations."""
