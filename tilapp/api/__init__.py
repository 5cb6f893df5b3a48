# tilapp/api/__init__.py
