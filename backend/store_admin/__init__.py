"""
Store Admin - e-commerce store dashboard

Backend store API plus the framework-independent dashboard core
(entity forms, delete guard, column definitions and navigation).
"""
__version__ = "1.0.0"
