# viz/__init__.py
