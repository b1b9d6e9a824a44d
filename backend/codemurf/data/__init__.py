"""
Reference and sample data for the marketplace
"""
