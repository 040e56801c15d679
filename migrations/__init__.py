"""Data loading commands"""
