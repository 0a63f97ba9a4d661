"""
Process-level operational helpers.
"""
