"""
lessonslots - teacher availability and class slot scheduling engine.
"""

__version__ = "0.1.0"
