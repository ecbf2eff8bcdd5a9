"""
Voyage App - Crew Signup and Coin Exchange Core

Headless form logic for a two-screen mobile app: a crew-recruitment
signup form with field validation, and a mock currency-exchange form
with fixed conversion rates. Rendering is left to the calling UI shell.
"""

__version__ = "0.1.0"
__author__ = "Voyage Team"
