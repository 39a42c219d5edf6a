"""Frontend framework layer for the Streamlit UI.

This package centralizes:
- page initialization (set_page_config + logging from settings)
- session-state helpers (wizard state, queued toasts, page hand-off)
"""
