"""Key-value persistence"""
