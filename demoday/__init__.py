"""
Demo Day - startup/investor match scoring and live dashboard service
"""
