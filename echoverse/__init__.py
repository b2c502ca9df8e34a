# Echoverse: AI content service and the client interaction layer its tools share.

__version__ = "1.0.0"
