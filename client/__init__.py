"""
PyQt6 client for the dice roller.
"""
