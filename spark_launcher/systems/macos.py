"""
macOS system detector
"""


class MacOSDetector:
    """macOS detection and settings"""

    system_type = "macos"
    lib_path_env_name = "DYLD_LIBRARY_PATH"
    path_separator = ":"
    java_executable = "java"

    def detect(self, os_name: str) -> bool:
        """Detect macOS (platform.system() reports 'Darwin')"""
        return os_name.lower() in ("darwin", "mac os x", "macos")
