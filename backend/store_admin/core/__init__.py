"""
Core infrastructure: settings and database access
"""
