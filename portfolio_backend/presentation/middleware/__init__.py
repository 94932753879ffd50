"""Presentation Middleware"""
