"""
PrefixedLogger facade, caller attribution and message formatting.

Re-exported from the top-level package; import submodules directly here to
keep the runtime <-> logger import order acyclic.
"""
