"""
pipeline package
----------------
Load → decode → render stages and the command-line entry point.
"""
