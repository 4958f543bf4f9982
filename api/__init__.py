"""
api clients for the bmkg forecast service
"""
