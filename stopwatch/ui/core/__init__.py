# stopwatch/ui/core/__init__.py
# Shared Rich building blocks
