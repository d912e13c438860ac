"""
Configuration and constants
"""
