"""
System detection orchestrator for spark_launcher

Coordinates system-specific detectors and provides a unified interface
for platform detection. Detection is a pure query on the platform name:
nothing is cached, the entry point runs it once and passes the result on.
"""

import logging
import platform
from typing import Optional

# Import system-specific detectors
from .windows import WindowsDetector
from .macos import MacOSDetector
from .linux import LinuxDetector


class SystemDetector:
    """Main system detection orchestrator"""

    # Registry of system detectors in priority order
    DETECTORS = [
        WindowsDetector,     # Check Windows first (batch output format)
        MacOSDetector,       # Then macOS
        LinuxDetector,       # Fallback to generic Unix
    ]

    @classmethod
    def detect(cls, os_name: Optional[str] = None):
        """
        Detect the platform using registered detectors

        Args:
            os_name: Platform name (defaults to platform.system())

        Returns:
            Detector instance for the platform; it carries system_type,
            lib_path_env_name, path_separator and java_executable
        """
        if os_name is None:
            os_name = platform.system()

        for detector_class in cls.DETECTORS:
            detector = detector_class()
            if detector.detect(os_name):
                logging.debug("System detected: %s (%s)", detector.system_type, os_name)
                return detector

        # Should never happen as LinuxDetector is catch-all
        return LinuxDetector()

    @classmethod
    def detect_system(cls, os_name: Optional[str] = None) -> str:
        """
        Detect system type

        Returns:
            str: System type identifier ('windows', 'macos', 'linux')
        """
        return cls.detect(os_name).system_type


def is_windows(os_name: Optional[str] = None) -> bool:
    """Return True when the launcher output targets a Windows batch script"""
    return SystemDetector.detect_system(os_name) == "windows"
