"""
Snapshot ingestion scripts
"""
