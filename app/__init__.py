"""
Flight reservation search service
"""
