"""Metric models, extraction and exposition"""
