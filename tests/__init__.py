"""
Daybook Test Suite

Tests for the Daybook API including:
- Task, comment and goal stores
- Bot task and bot goal stores
- Date and music utilities
- Logging setup
- HTTP endpoints

Author: jetgause
Created: 2025-12-11
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
test_dir = Path(__file__).parent
project_root = test_dir.parent
sys.path.insert(0, str(project_root))

__version__ = "1.0.0"
__all__ = []
