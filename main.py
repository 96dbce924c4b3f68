"""
Entry point for the text2lesson CLI.

Run with:
    python main.py compile lesson.txt
    python main.py render "Some *text*"
"""
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from src.cli.main import main

if __name__ == "__main__":
    main()
