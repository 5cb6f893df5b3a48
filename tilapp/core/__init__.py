# tilapp/core/__init__.py
