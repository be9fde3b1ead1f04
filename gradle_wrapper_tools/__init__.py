"""
Gradle Wrapper Tools
"""

__version__ = "1.0.0"
RPC_PROTOCOL_VERSION = "0.1"
