"""
System detection module for spark_launcher

Maps the host operating system to a platform type and provides the
platform-specific settings the launcher needs (library path variable,
path separator, java executable name).
"""

from .base import SystemDetector, is_windows
from .windows import WindowsDetector
from .macos import MacOSDetector
from .linux import LinuxDetector

__all__ = [
    "SystemDetector",     # Main orchestrator
    "is_windows",         # Platform query without a detector instance
    "WindowsDetector",    # Windows batch scripts
    "MacOSDetector",      # macOS (DYLD_LIBRARY_PATH)
    "LinuxDetector",      # Generic Unix fallback
]
