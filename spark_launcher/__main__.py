#!/usr/bin/env python3
"""
spark_launcher.__main__ - Module entry point
"""

import sys


def main():
    """Main entry point for console scripts"""
    from .main import main as launcher_main

    return launcher_main()


if __name__ == "__main__":
    sys.exit(main())
