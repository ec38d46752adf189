"""
Command-line tools
"""
