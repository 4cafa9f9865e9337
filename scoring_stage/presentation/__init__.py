"""
Presentation Layer Package

HTTP interface of the scoring stage.
"""
