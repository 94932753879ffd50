"""Message API Lambda Handler"""
