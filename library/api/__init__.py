# library/api/__init__.py
