# library/cli/__init__.py
