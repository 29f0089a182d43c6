"""
equifyctl command line interface.
"""
