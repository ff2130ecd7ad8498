"""
Allure attachment helpers for UI test evidence.
"""
