"""
GenAI Gateway

A thin async adapter around Google's Gemini and Imagen APIs.
"""

__version__ = "1.0.0"
__author__ = "GenAI Gateway Team"
__description__ = "Request shaping, response unwrapping and error normalization for Gemini"
