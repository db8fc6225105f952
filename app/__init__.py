"""FastAPI application"""
