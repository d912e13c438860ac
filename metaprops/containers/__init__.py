"""
ISO base media container readers
"""
