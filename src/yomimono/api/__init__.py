"""FastAPI application and REST API endpoints.

This module contains:
- Main FastAPI application configuration
- Authentication
- Story endpoints
"""
