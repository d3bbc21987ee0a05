# library/api/routes/__init__.py
