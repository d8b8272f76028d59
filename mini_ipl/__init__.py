"""
Mini IPL - round-robin cricket tournament simulation
"""
__version__ = "0.1.0"
