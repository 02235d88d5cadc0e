version = "1.2.3"
__version__ = version
