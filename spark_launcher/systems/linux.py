"""
Generic Unix system detector

Acts as catch-all detector when no specific system is identified.
"""


class LinuxDetector:
    """Generic Linux/Unix detection and settings"""

    system_type = "linux"
    lib_path_env_name = "LD_LIBRARY_PATH"
    path_separator = ":"
    java_executable = "java"

    def detect(self, os_name: str) -> bool:
        """
        Detect generic Unix system (catch-all)

        Returns:
            bool: Always True as this is the fallback
        """
        # More specific detectors are checked first
        return True
