"""
Only the root tests directory has an __init__.py; subdirectories rely on PEP 420
namespace packages, so keep test module names unique across the tree.
"""
