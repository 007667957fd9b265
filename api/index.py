"""
Vercel serverless function entry point for the Flask app
"""
import sys
import os

# Add parent directory to path to import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from unified_transliterator import app

# Vercel serves the WSGI application bound to 'app'
__all__ = ['app']
