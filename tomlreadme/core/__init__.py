"""
core package
------------
Exceptions, logging and CLI plumbing shared by every tomlreadme stage.
"""
