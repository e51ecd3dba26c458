"""
HomeHunt real-estate marketplace API.
"""
