"""
Wholesale Portal API
"""
