"""Metric exposition formats"""
