"""
Core models, formatting and processing
"""
