"""
Windows system detector

The launcher output on Windows is consumed by bin/spark-class2.cmd.
"""


class WindowsDetector:
    """Windows detection and settings"""

    system_type = "windows"
    lib_path_env_name = "PATH"
    path_separator = ";"
    java_executable = "java.exe"

    def detect(self, os_name: str) -> bool:
        """
        Detect Windows from the platform name

        Args:
            os_name: Value of platform.system() (or an override)

        Returns:
            bool: True for Windows, including Cygwin/MSYS style names
        """
        name = os_name.lower()
        return name.startswith("windows") or name.startswith("cygwin") or name.startswith("msys")
