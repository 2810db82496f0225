"""
Orders API - order management REST backend
"""
