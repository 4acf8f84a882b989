#!/usr/bin/env python3
"""
Uvicorn runner script for the chat server.
Makes the src/ layout importable without an install, then starts the
Socket.IO-wrapped FastAPI server.
"""

import sys
from pathlib import Path


def main():
    src_dir = Path(__file__).parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    try:
        from rosterchat.__main__ import main as run_server
    except ImportError as e:
        print(f"Error importing chat server: {e}")
        print(f"Python path: {sys.path}")
        sys.exit(1)

    run_server()


if __name__ == "__main__":
    main()
