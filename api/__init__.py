"""
FastAPI boundary for the Interview Coach.
"""
