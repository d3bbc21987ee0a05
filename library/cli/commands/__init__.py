# library/cli/commands/__init__.py
