"""Employment application service: resume pre-fill, storage and the application form PDF"""

__version__ = "1.0.0"
