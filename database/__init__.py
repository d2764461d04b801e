"""
Flight store package
"""
