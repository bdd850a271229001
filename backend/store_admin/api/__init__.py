"""
Store API routers, mounted under /api/{store_id}/{resource}
"""
