# hrms/__init__.py
