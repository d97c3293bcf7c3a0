"""
vargraph.commands - CLI command implementations
"""
