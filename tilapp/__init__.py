# tilapp/__init__.py
