"""
Configuration package for the BMI Calculator application.
"""

from .config import DEBUG, LOG_FILE, LOG_LEVEL, PORT, SERVER_NAME, SHARE
