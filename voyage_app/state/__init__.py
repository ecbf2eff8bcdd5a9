"""
Presentation-timing state shared by the forms.
"""
