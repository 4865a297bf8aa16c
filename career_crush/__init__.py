"""
Career Crush - Dream Job Match Score engine.

Scores tracked job applications against a user's weighted job preferences
and keeps the preference weights balanced at 100.
"""

__version__ = "0.1.0"
