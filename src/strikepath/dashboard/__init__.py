"""
Streamlit dashboard for drawing price predictions and reading option P&L.
"""
