"""
Utility functions module.

Number parsing shared by the exchange calculator. Parsing is strict and
fails closed: anything that is not a plain decimal literal is rejected
rather than guessed at.
"""
