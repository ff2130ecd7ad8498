"""
UI testing package: framework primitives, page objects and live tests.
"""
