"""
Database Base Module

The shared SQLAlchemy instance, kept apart from app.py so models can
import it without a circular import.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app in create_app()
db = SQLAlchemy()
