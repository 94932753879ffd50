"""Use Cases"""
