"""
HTTP service for the working days calculator.

The app itself lives in workingdays.api.main.
"""
