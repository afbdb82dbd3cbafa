"""
Constants and enums shared by the engine and the client.
"""
